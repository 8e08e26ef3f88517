# wisdom_bridge/services/completion.py
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import structlog
from langchain_core.language_models import BaseLanguageModel
from langchain_core.output_parsers import StrOutputParser
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = structlog.get_logger(__name__)

HARM_CATEGORIES = [
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_CIVIC_INTEGRITY",
]


class CompletionService(ABC):
    """Turns a prompt into text. Any call may fail, hang or ignore its instructions."""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        ...


def _log_retry(retry_state) -> None:
    logger.warning(
        "completion call failed, retrying",
        attempt=retry_state.attempt_number,
        error=str(retry_state.outcome.exception()),
    )


class LangChainCompletionService(CompletionService):
    def __init__(self, llm: BaseLanguageModel):
        self.llm = llm
        self.chain = llm | StrOutputParser()

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((ConnectionError, TimeoutError)),
        before_sleep=_log_retry,
        reraise=True,
    )
    async def generate(self, prompt: str) -> str:
        logger.debug("completion call", prompt_length=len(prompt))
        text = await self.chain.ainvoke(prompt)
        logger.debug("completion received", response_length=len(text or ""))
        return text


def build_safety_settings(threshold: str) -> Dict[Any, Any]:
    """Map every known harm category to the same Gemini block threshold"""
    from langchain_google_genai import HarmBlockThreshold, HarmCategory

    try:
        block = HarmBlockThreshold[threshold.upper()]
    except KeyError:
        raise ValueError(f"Unknown safety threshold: {threshold}") from None

    settings = {}
    for name in HARM_CATEGORIES:
        try:
            settings[HarmCategory[name]] = block
        except KeyError:
            logger.warning("harm category not supported by provider, skipping", category=name)
    return settings


def create_completion_service(provider: Optional[str] = None,
                              temperature: float = 0.7) -> CompletionService:
    """Create the completion service selected by LLM_PROVIDER"""
    from wisdom_bridge.config import (
        LLM_PROVIDER, OLLAMA_BASE_URL, OLLAMA_MODEL,
        GOOGLE_API_KEY, GEMINI_MODEL, SAFETY_BLOCK_THRESHOLD,
    )

    provider = (provider or LLM_PROVIDER).lower()

    if provider == "ollama":
        from langchain_ollama import OllamaLLM
        llm = OllamaLLM(
            base_url=OLLAMA_BASE_URL,
            model=OLLAMA_MODEL,
            temperature=temperature
        )
    elif provider == "gemini":
        from langchain_google_genai import ChatGoogleGenerativeAI
        llm = ChatGoogleGenerativeAI(
            model=GEMINI_MODEL,
            google_api_key=GOOGLE_API_KEY,
            temperature=temperature,
            safety_settings=build_safety_settings(SAFETY_BLOCK_THRESHOLD)
        )
    else:
        raise ValueError(f"Unknown LLM provider: {provider}")

    logger.info("completion service created", provider=provider, temperature=temperature)
    return LangChainCompletionService(llm)
