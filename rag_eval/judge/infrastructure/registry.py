"""Judge adapter registry — maps JudgeConfig.provider to a JudgeAdapter."""

from rag_eval.config.domain.judge import JudgeConfig
from rag_eval.judge.domain.adapter import JudgeAdapter
from rag_eval.judge.domain.observer import JudgeObserver
from rag_eval.judge.infrastructure.errors import JudgeTypeNotSupportedError
from rag_eval.judge.infrastructure.litellm import LiteLLMJudgeAdapter

_SUPPORTED_PROVIDER = "litellm"


def create_judge_adapter(config: JudgeConfig, observer: JudgeObserver) -> JudgeAdapter:
    """Return the appropriate JudgeAdapter for the given JudgeConfig.

    Raises:
        JudgeTypeNotSupportedError: if config.provider is not a known provider.
    """
    if config.provider == _SUPPORTED_PROVIDER:
        return LiteLLMJudgeAdapter(config=config, observer=observer)

    raise JudgeTypeNotSupportedError(provider=config.provider)
