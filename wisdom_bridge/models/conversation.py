# wisdom_bridge/models/conversation.py
from pydantic import BaseModel, Field
from typing import List
from datetime import datetime
from enum import Enum

class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"

class ChatTurn(BaseModel):
    role: MessageRole
    text: str
    timestamp: datetime = Field(default_factory=datetime.now)

class ChatReply(BaseModel):
    text: str

class TopicPolicy(BaseModel):
    """The single subject the chat helper is allowed to discuss"""
    name: str
    description: str
    on_topic_examples: List[str] = []
    off_topic_examples: List[str] = []

    @property
    def refusal(self) -> str:
        return f"Sorry, I can only discuss topics related to {self.description}."

PYTHON_TOPIC = TopicPolicy(
    name="Python",
    description="the Python programming language",
    on_topic_examples=[
        "how to define a function in python?",
        "what are python lists?",
        "explain python decorators",
    ],
    off_topic_examples=[
        "hello",
        "what is Java?",
        "tell me a joke",
        "who are you?",
        "what is Wisdom Bridge?",
    ],
)
