"""
Unit tests for the single-topic chat gatekeeper.
"""

import asyncio

import pytest
from langchain_core.language_models import FakeListLLM

from wisdom_bridge.models.conversation import PYTHON_TOPIC, TopicPolicy
from wisdom_bridge.services.completion import LangChainCompletionService
from wisdom_bridge.services.gatekeeper import DEFAULT_QUERY, GatekeeperService

PYTHON_REFUSAL = "Sorry, I can only discuss topics related to the Python programming language."
EMPTY_FALLBACK = "I'm sorry, I couldn't generate a response for that. I can only discuss Python topics."
ERROR_FALLBACK = "An unexpected error occurred. Please try again later. I can only assist with Python-related queries."


class TestPrompt:
    def test_python_refusal_sentence(self):
        assert PYTHON_TOPIC.refusal == PYTHON_REFUSAL

    def test_prompt_names_topic_refusal_and_query(self, stub_completion):
        service = GatekeeperService(stub_completion())

        prompt = service.build_prompt("what are python lists?")

        assert "answer questions about the Python programming language" in prompt
        assert f'"{PYTHON_REFUSAL}"' in prompt
        assert '"explain python decorators"' in prompt
        assert '"tell me a joke"' in prompt
        assert prompt.rstrip().endswith("User query: what are python lists?")

    def test_custom_topic(self, stub_completion):
        topic = TopicPolicy(name="Rust", description="the Rust programming language")
        service = GatekeeperService(stub_completion(), topic=topic)

        prompt = service.build_prompt("what is a borrow checker?")

        assert "Sorry, I can only discuss topics related to the Rust programming language." in prompt
        assert service.empty_reply_fallback.endswith("I can only discuss Rust topics.")


class TestSanitize:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", "   ", None, 42, ["python"]])
    async def test_bad_input_uses_default_query(self, stub_completion, query):
        completion = stub_completion(response=PYTHON_REFUSAL)
        service = GatekeeperService(completion)

        reply = await service.reply(query)

        assert reply.text
        assert completion.prompts[0].rstrip().endswith(f"User query: {DEFAULT_QUERY}")

    @pytest.mark.asyncio
    async def test_empty_query_with_empty_reply_still_answers(self, stub_completion):
        service = GatekeeperService(stub_completion(response=""))

        reply = await service.reply("")

        assert reply.text == EMPTY_FALLBACK


class TestReply:
    @pytest.mark.asyncio
    async def test_returns_model_text_verbatim(self, stub_completion):
        answer = "Use `def` to define a function:\n\n    def greet(name):\n        return f'hi {name}'\n"
        service = GatekeeperService(stub_completion(response=answer))

        reply = await service.reply("how to define a function in python?")

        assert reply.text == answer

    @pytest.mark.asyncio
    @pytest.mark.parametrize("response", ["", "  \n", None])
    async def test_empty_model_text_returns_fallback(self, stub_completion, response):
        service = GatekeeperService(stub_completion(response=response))

        reply = await service.reply("what is a generator?")

        assert reply.text == EMPTY_FALLBACK

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [RuntimeError("quota"), ConnectionError("reset"), ValueError("bad")])
    async def test_service_exception_returns_fallback(self, stub_completion, error):
        service = GatekeeperService(stub_completion(error=error))

        reply = await service.reply("what is a generator?")

        assert reply.text == ERROR_FALLBACK

    @pytest.mark.asyncio
    async def test_each_call_is_stateless(self, stub_completion):
        completion = stub_completion(response="ok")
        service = GatekeeperService(completion)

        await service.reply("first question about python")
        await service.reply("second question")

        assert "first question" not in completion.prompts[1]

    @pytest.mark.asyncio
    async def test_works_through_langchain_completion(self):
        llm = FakeListLLM(responses=[PYTHON_REFUSAL])
        service = GatekeeperService(LangChainCompletionService(llm))

        reply = await service.reply("tell me a joke")

        assert reply.text == PYTHON_REFUSAL

    @pytest.mark.asyncio
    async def test_concurrent_replies(self, stub_completion):
        service = GatekeeperService(stub_completion(response="answer"))

        replies = await asyncio.gather(*[service.reply(f"question {i}") for i in range(5)])

        assert [r.text for r in replies] == ["answer"] * 5
