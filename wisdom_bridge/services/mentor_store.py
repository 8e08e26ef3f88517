# wisdom_bridge/services/mentor_store.py
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional
import asyncio
import re

import structlog

from wisdom_bridge.models.mentor import MentorProfile

logger = structlog.get_logger(__name__)


class MentorRepository(ABC):
    """Read-only access to the mentor catalogue"""

    @abstractmethod
    async def get_all(self) -> List[MentorProfile]:
        """Get every mentor, in catalogue order"""

    @abstractmethod
    async def get_by_id(self, mentor_id: str) -> Optional[MentorProfile]:
        """Get a mentor by ID, None when absent"""

    @abstractmethod
    async def find_by_field(self, field: str) -> List[MentorProfile]:
        """Mentors with an expertise field containing `field` (case-insensitive)"""

    @abstractmethod
    async def search(self, query: str) -> List[MentorProfile]:
        """Mentors whose name or any expertise field contains `query` (case-insensitive)"""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[MentorProfile]:
        """First mentor whose name contains `name` (case-insensitive)"""


class InMemoryMentorRepository(MentorRepository):
    def __init__(self, mentors: Iterable[MentorProfile], latency: float = 0.0):
        self._mentors: List[MentorProfile] = []
        seen = set()
        for mentor in mentors:
            if mentor.id in seen:
                raise ValueError(f"Duplicate mentor id: {mentor.id}")
            seen.add(mentor.id)
            self._mentors.append(mentor)
        self.latency = latency

    async def _simulate_latency(self):
        if self.latency > 0:
            await asyncio.sleep(self.latency)

    async def get_all(self) -> List[MentorProfile]:
        await self._simulate_latency()
        return [mentor.model_copy(deep=True) for mentor in self._mentors]

    async def get_by_id(self, mentor_id: str) -> Optional[MentorProfile]:
        await self._simulate_latency()
        for mentor in self._mentors:
            if mentor.id == mentor_id:
                return mentor.model_copy(deep=True)
        return None

    async def find_by_field(self, field: str) -> List[MentorProfile]:
        if not field:
            return []
        needle = field.lower()
        await self._simulate_latency()
        return [
            mentor.model_copy(deep=True)
            for mentor in self._mentors
            if _any_field_contains(mentor, needle)
        ]

    async def search(self, query: str) -> List[MentorProfile]:
        if not query or not query.strip():
            return []
        needle = query.lower()
        await self._simulate_latency()
        return [
            mentor.model_copy(deep=True)
            for mentor in self._mentors
            if needle in mentor.name.lower() or _any_field_contains(mentor, needle)
        ]

    async def find_by_name(self, name: str) -> Optional[MentorProfile]:
        if not name or not name.strip():
            return None
        needle = name.lower()
        await self._simulate_latency()
        for mentor in self._mentors:
            if needle in mentor.name.lower():
                return mentor.model_copy(deep=True)
        return None


def _any_field_contains(mentor: MentorProfile, needle: str) -> bool:
    return any(needle in label.lower() for label in mentor.expertise_fields)


class MongoMentorRepository(MentorRepository):
    """Mentor catalogue stored in a MongoDB collection, one document per mentor keyed by `_id`"""

    SEED_POSITION = "seed_position"

    def __init__(self, collection):
        self.mentors = collection

    @classmethod
    def from_config(cls) -> "MongoMentorRepository":
        from pymongo import MongoClient
        from wisdom_bridge.config import MONGODB_URI, MONGODB_DB, MONGODB_MENTOR_COLLECTION

        client = MongoClient(MONGODB_URI)
        return cls(client[MONGODB_DB][MONGODB_MENTOR_COLLECTION])

    def seed(self, mentors: Iterable[MentorProfile]) -> int:
        """Upsert the given mentors by id, returns how many were written"""
        count = 0
        for mentor in mentors:
            document = mentor.model_dump(exclude={"id"})
            document[self.SEED_POSITION] = count
            self.mentors.replace_one({"_id": mentor.id}, document, upsert=True)
            count += 1
        logger.info("mentor catalogue seeded", count=count)
        return count

    @staticmethod
    def _to_profile(document: Dict[str, Any]) -> MentorProfile:
        data = dict(document)
        data["id"] = str(data.pop("_id"))
        data.pop(MongoMentorRepository.SEED_POSITION, None)
        return MentorProfile(**data)

    @staticmethod
    def _contains(text: str) -> Dict[str, str]:
        return {"$regex": re.escape(text), "$options": "i"}

    async def get_all(self) -> List[MentorProfile]:
        return [self._to_profile(doc) for doc in self.mentors.find({}).sort(self.SEED_POSITION, 1)]

    async def get_by_id(self, mentor_id: str) -> Optional[MentorProfile]:
        document = self.mentors.find_one({"_id": mentor_id})
        return self._to_profile(document) if document else None

    async def find_by_field(self, field: str) -> List[MentorProfile]:
        if not field:
            return []
        cursor = self.mentors.find({"expertise_fields": self._contains(field)}).sort(self.SEED_POSITION, 1)
        return [self._to_profile(doc) for doc in cursor]

    async def search(self, query: str) -> List[MentorProfile]:
        if not query or not query.strip():
            return []
        cursor = self.mentors.find({
            "$or": [
                {"name": self._contains(query)},
                {"expertise_fields": self._contains(query)},
            ]
        }).sort(self.SEED_POSITION, 1)
        return [self._to_profile(doc) for doc in cursor]

    async def find_by_name(self, name: str) -> Optional[MentorProfile]:
        if not name or not name.strip():
            return None
        document = self.mentors.find_one(
            {"name": self._contains(name)},
            sort=[(self.SEED_POSITION, 1)]
        )
        return self._to_profile(document) if document else None


def create_mentor_repository(backend: Optional[str] = None) -> MentorRepository:
    """Build the mentor repository selected by MENTOR_STORE_BACKEND"""
    from wisdom_bridge.config import MENTOR_STORE_BACKEND, MENTOR_STORE_LATENCY
    from wisdom_bridge.data.seed_mentors import SEED_MENTORS

    backend = (backend or MENTOR_STORE_BACKEND).lower()
    if backend == "memory":
        return InMemoryMentorRepository(SEED_MENTORS, latency=MENTOR_STORE_LATENCY)
    if backend == "mongodb":
        repository = MongoMentorRepository.from_config()
        repository.seed(SEED_MENTORS)
        return repository
    raise ValueError(f"Unknown mentor store backend: {backend}")
