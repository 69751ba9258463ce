import enum

from pydantic import BaseModel, Field, field_validator, model_validator

from spotle.consts import DEFAULT_SECRET, MAX_ATTEMPTS, WORD_LENGTH
from spotle.mask import Mask


class ThemeName(enum.StrEnum):
    LIGHT = "light"
    DARK = "dark"


class GameConfig(BaseModel):
    secret: str = DEFAULT_SECRET
    max_attempts: int = Field(default=MAX_ATTEMPTS, ge=1)
    word_length: int = Field(default=WORD_LENGTH, ge=1)
    # None selects the default hint schedule.
    mask: list[list[bool]] | None = None
    theme: ThemeName = ThemeName.DARK

    @field_validator("secret")
    @classmethod
    def normalize_secret(cls, secret: str) -> str:
        return secret.strip().lower()

    @model_validator(mode="after")
    def check_dimensions(self) -> "GameConfig":
        if len(self.secret) != self.word_length:
            raise ValueError(f"secret {self.secret!r} must have {self.word_length} letters")

        if self.mask is not None:
            if len(self.mask) != self.max_attempts:
                raise ValueError(f"mask must have {self.max_attempts} rows, got {len(self.mask)}")
            for row in self.mask:
                if len(row) != self.word_length:
                    raise ValueError(f"mask rows must have {self.word_length} cells, got {len(row)}")

        return self

    def build_mask(self) -> Mask:
        if self.mask is None:
            return Mask.default(self.max_attempts, self.word_length)
        return Mask(self.mask)


def load_config(path: str) -> GameConfig:
    with open(path, "r") as f:
        return GameConfig.model_validate_json(f.read())
