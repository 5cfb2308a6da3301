"""Normalized output of one natural-language analysis call."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EntityType(str, Enum):
    UNKNOWN = "UNKNOWN"
    PERSON = "PERSON"
    LOCATION = "LOCATION"
    ORGANIZATION = "ORGANIZATION"
    EVENT = "EVENT"
    WORK_OF_ART = "WORK_OF_ART"
    CONSUMER_GOOD = "CONSUMER_GOOD"
    OTHER = "OTHER"
    PHONE_NUMBER = "PHONE_NUMBER"
    ADDRESS = "ADDRESS"
    DATE = "DATE"
    NUMBER = "NUMBER"
    PRICE = "PRICE"

    @classmethod
    def from_name(cls, name: str) -> "EntityType":
        return cls.__members__.get(name, cls.OTHER)


class Sentiment(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float = Field(0.0, ge=-1.0, le=1.0)
    magnitude: float = Field(0.0, ge=0.0)


class Entity(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    type: EntityType = EntityType.OTHER
    salience: float = Field(0.0, ge=0.0, le=1.0)
    sentiment: Sentiment = Sentiment()
    metadata: dict[str, str] = {}


class Sentence(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    begin_offset: int = 0


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    confidence: float = Field(0.0, ge=0.0, le=1.0)


class TextSignal(BaseModel):
    """Sentiment, entities, sentence breakdown and categories for one text.

    Produced once per analyzed field and never mutated. Entity order is
    whatever the backend returned; consumers must not rely on it.
    """

    model_config = ConfigDict(frozen=True)

    sentiment: Sentiment = Sentiment()
    entities: tuple[Entity, ...] = ()
    sentences: tuple[Sentence, ...] = ()
    categories: tuple[Category, ...] = ()
    language: str = ""

    @property
    def score(self) -> float:
        return self.sentiment.score

    @property
    def magnitude(self) -> float:
        return self.sentiment.magnitude
