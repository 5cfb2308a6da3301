"""Shared fixtures: in-memory stand-ins for every backend client."""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_services, limiter
from main import app
from models.schemas.text_signal import Entity, EntityType, Sentence, Sentiment, TextSignal
from services.container import Services
from services.errors import AuthenticationError, PersistenceError, UpstreamError
from services.identity import AuthUser

VALID_TOKEN = "valid-token"
USER_ID = "user-1"
AUTH_HEADERS = {"Authorization": f"Bearer {VALID_TOKEN}"}


def make_entity(name: str, salience: float = 0.5, score: float = 0.0, type=EntityType.OTHER, **metadata) -> Entity:
    return Entity(
        name=name,
        type=type,
        salience=salience,
        sentiment=Sentiment(score=score, magnitude=abs(score)),
        metadata=metadata,
    )


def make_signal(score: float = 0.0, magnitude: float = 0.0, entities=(), sentences=0, categories=()) -> TextSignal:
    return TextSignal(
        sentiment=Sentiment(score=score, magnitude=magnitude),
        entities=tuple(entities),
        sentences=tuple(Sentence(text=f"Sentence {i}.", begin_offset=i * 12) for i in range(sentences)),
        categories=tuple(categories),
        language="en",
    )


class FakeExtractor:
    """Returns canned signals keyed by input text; unknown text gets a neutral signal."""

    def __init__(self) -> None:
        self.signals: dict[str, TextSignal] = {}
        self.calls: list[str] = []
        self.classify_flags: list[bool] = []
        self.error: Exception | None = None

    async def extract(self, text: str, *, classify: bool = True) -> TextSignal:
        self.calls.append(text)
        self.classify_flags.append(classify)
        if self.error is not None:
            raise self.error
        return self.signals.get(text, make_signal())


class FakePredictor:
    def __init__(self) -> None:
        self.prompts: list[str] = []
        self.parameters = []
        self.reply = "Generated text"
        self.error: Exception | None = None

    async def generate(self, prompt, parameters=None) -> str:
        self.prompts.append(prompt)
        self.parameters.append(parameters)
        if self.error is not None:
            raise self.error
        return self.reply


class FakeStore:
    def __init__(self) -> None:
        self.entries: dict[tuple[str, str, str], dict[str, dict]] = {}
        self.merged: dict[tuple[str, str], dict] = {}
        self.profiles: dict[str, dict] = {}
        self.startups: dict[str, dict] = {}
        self.fail = False
        self._next_id = 0

    def _check(self) -> None:
        if self.fail:
            raise PersistenceError("Failed to save result")

    def _new_id(self) -> str:
        self._next_id += 1
        return f"doc-{self._next_id}"

    async def append(self, user_id, category, entry, payload, timestamp_field="timestamp"):
        self._check()
        doc_id = self._new_id()
        self.entries.setdefault((user_id, category, entry), {})[doc_id] = {
            **payload,
            timestamp_field: "2026-01-01T00:00:00Z",
        }
        return doc_id

    async def merge(self, user_id, category, payload, timestamp_field="last_updated"):
        self._check()
        self.merged.setdefault((user_id, category), {}).update(payload)

    async def list_entries(self, user_id, category, entry, where=None, order_by=None, descending=True):
        self._check()
        docs = self.entries.get((user_id, category, entry), {})
        return [
            {"id": doc_id, **doc}
            for doc_id, doc in docs.items()
            if all(doc.get(k) == v for k, v in (where or {}).items())
        ]

    async def get_entry(self, user_id, category, entry, doc_id):
        self._check()
        return self.entries.get((user_id, category, entry), {}).get(doc_id)

    async def delete_entry(self, user_id, category, entry, doc_id):
        self._check()
        self.entries.get((user_id, category, entry), {}).pop(doc_id, None)

    async def create_profile(self, user_id, name, email):
        self._check()
        self.profiles[user_id] = {"name": name, "email": email, "startups": [], "skills": [], "preferences": {}}

    async def get_profile(self, user_id):
        self._check()
        return self.profiles.get(user_id)

    async def update_profile(self, user_id, changes):
        self._check()
        self.profiles.setdefault(user_id, {}).update(changes)

    async def add_startup(self, user_id, startup):
        self._check()
        startup_id = self._new_id()
        self.startups[startup_id] = {**startup, "user_id": user_id}
        self.profiles.setdefault(user_id, {"startups": []}).setdefault("startups", []).append(startup_id)
        return startup_id

    async def list_startups(self, user_id):
        self._check()
        ids = self.profiles.get(user_id, {}).get("startups", [])
        return [{"id": i, **self.startups[i]} for i in ids if i in self.startups]


class FakeIdentity:
    def __init__(self) -> None:
        self.created: list[AuthUser] = []

    async def verify(self, token: str) -> str:
        if token != VALID_TOKEN:
            raise AuthenticationError("Invalid or expired token")
        return USER_ID

    async def create_user(self, email, password, name) -> AuthUser:
        user = AuthUser(uid=f"uid-{len(self.created) + 1}", email=email, name=name)
        self.created.append(user)
        return user

    async def create_custom_token(self, uid: str) -> str:
        return f"custom-token-{uid}"


class FakeFiles:
    def __init__(self) -> None:
        self.uploads: list[tuple[str, str, str, bytes]] = []
        self.deleted: list[str] = []
        self.error: Exception | None = None

    async def upload(self, bucket, folder, filename, content, content_type=None) -> str:
        if self.error is not None:
            raise self.error
        self.uploads.append((bucket, folder, filename, content))
        return f"https://storage.googleapis.com/{bucket}/{folder}/1700000000000-{filename}"

    async def delete(self, url: str) -> None:
        self.deleted.append(url)


class FakeQueue:
    def __init__(self) -> None:
        self.tasks: list[dict] = []
        self.published: list[tuple[str, dict]] = []
        self.error: Exception | None = None

    async def create_task(self, payload, schedule_time=None) -> str:
        if self.error is not None:
            raise self.error
        self.tasks.append(payload)
        return f"projects/demo/locations/us-central1/queues/genai-tasks/tasks/{len(self.tasks)}"

    async def publish(self, topic, message) -> str:
        if self.error is not None:
            raise self.error
        self.published.append((topic, message))
        return f"msg-{len(self.published)}"


@pytest.fixture
def services() -> Services:
    return Services(
        extractor=FakeExtractor(),
        predictor=FakePredictor(),
        store=FakeStore(),
        identity=FakeIdentity(),
        files=FakeFiles(),
        queue=FakeQueue(),
    )


@pytest.fixture
def client(services):
    limiter.enabled = False
    app.dependency_overrides[get_services] = lambda: services
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.fixture
def upstream_down():
    return UpstreamError("Text analysis backend unavailable")
