import pytest

from surveybot.config import Settings


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        GROQ_API_KEY="test-key",
        TELEGRAM_BOT_TOKEN="123:abc",
        TELEGRAM_CHAT_ID="42",
        RESULT_FILE=str(tmp_path / "result.txt"),
        LOG_FILE_PATH=str(tmp_path / "surveybot.log"),
    )


def _completion_response(content):
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


class FakeCompletionClient:
    def __init__(self, content=None, error=None):
        self.content = content
        self.error = error
        self.prompts = []

    def complete(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return _completion_response(self.content)


@pytest.fixture
def completion_response():
    """Build a chat-completions response mapping around a content string."""
    return _completion_response


@pytest.fixture
def fake_completion():
    """Factory for a completion client that returns fixed content or raises."""
    return FakeCompletionClient
