# wisdom_bridge/services/gatekeeper.py
from typing import Any, Optional

import structlog
from langchain_core.prompts import PromptTemplate

from wisdom_bridge.models.conversation import ChatReply, TopicPolicy, PYTHON_TOPIC
from wisdom_bridge.services.completion import CompletionService
from wisdom_bridge.utils.prompts import GATEKEEPER_PROMPT

logger = structlog.get_logger(__name__)

DEFAULT_QUERY = "Is this Python related?"


class GatekeeperService:
    """Chat helper that only answers questions about one topic"""

    def __init__(self,
                 completion_service: Optional[CompletionService] = None,
                 topic: TopicPolicy = PYTHON_TOPIC):
        if completion_service is None:
            from wisdom_bridge.config import CHAT_TEMPERATURE
            from wisdom_bridge.services.completion import create_completion_service
            completion_service = create_completion_service(temperature=CHAT_TEMPERATURE)

        self.completion_service = completion_service
        self.topic = topic
        self.prompt = PromptTemplate(
            template=GATEKEEPER_PROMPT,
            input_variables=["query"],
            partial_variables={
                "topic_name": topic.name,
                "topic_description": topic.description,
                "on_topic_examples": ", ".join(f'"{q}"' for q in topic.on_topic_examples),
                "off_topic_examples": ", ".join(f'"{q}"' for q in topic.off_topic_examples),
                "refusal": topic.refusal,
            }
        )

    @property
    def empty_reply_fallback(self) -> str:
        return (f"I'm sorry, I couldn't generate a response for that. "
                f"I can only discuss {self.topic.name} topics.")

    @property
    def error_fallback(self) -> str:
        return (f"An unexpected error occurred. Please try again later. "
                f"I can only assist with {self.topic.name}-related queries.")

    def sanitize_query(self, query: Any) -> str:
        if isinstance(query, str) and query.strip():
            return query
        logger.warning("invalid or empty chat query, using default", query_type=type(query).__name__)
        return DEFAULT_QUERY

    def build_prompt(self, query: str) -> str:
        return self.prompt.format(query=query)

    async def reply(self, query: Any) -> ChatReply:
        """Answer an on-topic question or refuse. Never raises."""
        safe_query = self.sanitize_query(query)
        prompt_text = self.build_prompt(safe_query)

        try:
            text = await self.completion_service.generate(prompt_text)
        except Exception as e:
            logger.error("completion service failed", topic=self.topic.name,
                         error_type=type(e).__name__, error=str(e))
            return ChatReply(text=self.error_fallback)

        if isinstance(text, str) and text.strip():
            logger.info("chat reply generated", topic=self.topic.name, reply_length=len(text))
            return ChatReply(text=text)

        logger.warning("completion service returned no text", topic=self.topic.name)
        return ChatReply(text=self.empty_reply_fallback)
