import enum


class LLMProvider(str, enum.Enum):
    OPENAI = "openai"
