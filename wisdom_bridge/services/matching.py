# wisdom_bridge/services/matching.py
from typing import Dict, List, Optional, Tuple, Union

import structlog
from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import PydanticOutputParser
from langchain_core.prompts import PromptTemplate

from wisdom_bridge.models.mentor import MentorProfile
from wisdom_bridge.models.recommendation import (
    MatchOutcome,
    MatchOutcomeKind,
    MentorRecommendationInput,
    MentorRecommendationOutput,
    RecommendedMentor,
)
from wisdom_bridge.services.completion import CompletionService
from wisdom_bridge.services.mentor_store import MentorRepository
from wisdom_bridge.utils.prompts import RECOMMENDATION_PROMPT

logger = structlog.get_logger(__name__)

MAX_RECOMMENDATIONS = 3

NO_MENTORS_ANALYSIS = (
    "Currently, there are no mentors available in our database. Please check back later."
)
REPHRASE_ANALYSIS = (
    "I couldn't find suitable mentor recommendations based on your query at this time. "
    "You might want to try rephrasing your request or check our general mentor listings."
)
ERROR_ANALYSIS = (
    "An unexpected error occurred while trying to generate mentor recommendations. "
    "Please try again later or rephrase your request."
)


def format_mentor_profiles(mentors: List[MentorProfile]) -> str:
    """Serialize the catalogue the way the recommendation prompt expects it"""
    if not mentors:
        return "No mentors currently available in the database."
    return "\n".join(
        f"Mentor ID: {mentor.id}\n"
        f"Name: {mentor.name}\n"
        f"Expertise: {', '.join(mentor.expertise_fields)}\n"
        f"Summary: {mentor.experience_summary}\n"
        f"Availability: {mentor.availability or 'Not specified'}\n"
        "---\n"
        for mentor in mentors
    )


class MatchingService:
    def __init__(self,
                 mentor_repository: Optional[MentorRepository] = None,
                 completion_service: Optional[CompletionService] = None):
        if mentor_repository is None:
            from wisdom_bridge.services.mentor_store import create_mentor_repository
            mentor_repository = create_mentor_repository()
        if completion_service is None:
            from wisdom_bridge.config import RECOMMENDATION_TEMPERATURE
            from wisdom_bridge.services.completion import create_completion_service
            completion_service = create_completion_service(temperature=RECOMMENDATION_TEMPERATURE)

        self.mentor_repository = mentor_repository
        self.completion_service = completion_service
        self.parser = PydanticOutputParser(pydantic_object=MentorRecommendationOutput)
        self.prompt = PromptTemplate(
            template=RECOMMENDATION_PROMPT,
            input_variables=["user_query", "mentor_profiles_context"],
            partial_variables={
                "format_instructions": self.parser.get_format_instructions(),
                "max_recommendations": str(MAX_RECOMMENDATIONS),
            }
        )

    async def recommend(self, query: Union[str, MentorRecommendationInput]) -> MentorRecommendationOutput:
        """Recommend up to three mentors for a free-text need. Never raises."""
        outcome = await self.recommend_with_outcome(query)
        return outcome.result

    async def recommend_with_outcome(self, query: Union[str, MentorRecommendationInput]) -> MatchOutcome:
        if isinstance(query, MentorRecommendationInput):
            query = query.user_query
        user_query = query if isinstance(query, str) else ""
        log = logger.bind(query_length=len(user_query))

        try:
            mentors = await self.mentor_repository.get_all()
        except Exception as e:
            log.error("mentor catalogue unavailable", error_type=type(e).__name__, error=str(e))
            return self._fallback(MatchOutcomeKind.UPSTREAM_FAILURE, ERROR_ANALYSIS, str(e))

        if not mentors:
            log.info("no mentors in catalogue, skipping completion call")
            return self._fallback(MatchOutcomeKind.EMPTY_CATALOGUE, NO_MENTORS_ANALYSIS)

        prompt_text = self.prompt.format(
            user_query=user_query,
            mentor_profiles_context=format_mentor_profiles(mentors)
        )
        log.debug("recommendation prompt rendered", prompt_length=len(prompt_text), mentors=len(mentors))

        try:
            response = await self.completion_service.generate(prompt_text)
        except Exception as e:
            log.error("completion service failed", error_type=type(e).__name__, error=str(e))
            return self._fallback(MatchOutcomeKind.UPSTREAM_FAILURE, ERROR_ANALYSIS, str(e))

        if not isinstance(response, str) or not response.strip():
            log.warning("completion service returned no text")
            return self._fallback(MatchOutcomeKind.INVALID_OUTPUT, REPHRASE_ANALYSIS, "empty response")

        try:
            output = self.parser.parse(response)
        except OutputParserException as e:
            log.warning("recommendation output did not match schema", response=response[:200])
            return self._fallback(MatchOutcomeKind.INVALID_OUTPUT, REPHRASE_ANALYSIS, str(e))

        result, dropped_ids = self._reconcile(output, mentors)
        if dropped_ids:
            log.warning("dropped recommendations not matching the catalogue", dropped_ids=dropped_ids)
        log.info("recommendation finished", outcome=MatchOutcomeKind.OK.value,
                 count=len(result.recommendations))
        return MatchOutcome(kind=MatchOutcomeKind.OK, result=result, dropped_ids=dropped_ids)

    @staticmethod
    def _fallback(kind: MatchOutcomeKind, analysis: str, detail: Optional[str] = None) -> MatchOutcome:
        return MatchOutcome(
            kind=kind,
            result=MentorRecommendationOutput(recommendations=[], analysis=analysis),
            detail=detail
        )

    @staticmethod
    def _reconcile(output: MentorRecommendationOutput,
                   mentors: List[MentorProfile]) -> Tuple[MentorRecommendationOutput, List[str]]:
        """Keep only recommendations that point at real, distinct mentors, with store data copied in"""
        catalogue: Dict[str, MentorProfile] = {mentor.id: mentor for mentor in mentors}
        kept: List[RecommendedMentor] = []
        dropped_ids: List[str] = []
        seen = set()

        for recommendation in output.recommendations:
            mentor = catalogue.get(recommendation.mentor_id)
            if mentor is None or mentor.id in seen:
                dropped_ids.append(recommendation.mentor_id)
                continue
            seen.add(mentor.id)

            fields = None
            if recommendation.expertise_fields is not None:
                known = {label.lower() for label in mentor.expertise_fields}
                fields = [label for label in recommendation.expertise_fields if label.lower() in known]

            kept.append(recommendation.model_copy(update={
                "mentor_name": mentor.name,
                "expertise_fields": fields or None,
            }))

        if len(kept) > MAX_RECOMMENDATIONS:
            dropped_ids.extend(r.mentor_id for r in kept[MAX_RECOMMENDATIONS:])
            kept = kept[:MAX_RECOMMENDATIONS]

        analysis = output.analysis
        if not kept and dropped_ids and not analysis:
            analysis = REPHRASE_ANALYSIS

        return MentorRecommendationOutput(recommendations=kept, analysis=analysis), dropped_ids
