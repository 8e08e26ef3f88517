# tests/conftest.py
from typing import List, Optional

import pytest

from wisdom_bridge.data.seed_mentors import SEED_MENTORS
from wisdom_bridge.services.completion import CompletionService
from wisdom_bridge.services.mentor_store import InMemoryMentorRepository


class StubCompletionService(CompletionService):
    """Returns a canned response (or raises) and records every prompt it was given"""

    def __init__(self, response: Optional[str] = "", error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def repository():
    return InMemoryMentorRepository(SEED_MENTORS)


@pytest.fixture
def empty_repository():
    return InMemoryMentorRepository([])


@pytest.fixture
def stub_completion():
    return StubCompletionService
