"""
Data models for the raid advisor.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TeraType(str, Enum):
    """The 18 Tera types a raid opponent can carry."""
    NORMAL = "ノーマル"
    FIRE = "ほのお"
    WATER = "みず"
    ELECTRIC = "でんき"
    GRASS = "くさ"
    ICE = "こおり"
    FIGHTING = "かくとう"
    POISON = "どく"
    GROUND = "じめん"
    FLYING = "ひこう"
    PSYCHIC = "エスパー"
    BUG = "むし"
    ROCK = "いわ"
    GHOST = "ゴースト"
    DRAGON = "ドラゴン"
    DARK = "あく"
    STEEL = "はがね"
    FAIRY = "フェアリー"


class RaidRank(str, Enum):
    """Star ranks of a Tera Raid, from easiest to hardest."""
    ONE_TWO_STAR = "★1〜2"
    THREE_STAR = "★3"
    FOUR_STAR = "★4"
    FIVE_STAR = "★5"
    SIX_STAR = "★6"
    SEVEN_STAR = "★7(最強レイド)"

    @classmethod
    def default(cls) -> "RaidRank":
        return cls.SIX_STAR


class ReferenceEntity(BaseModel):
    """A creature from the bundled reference dataset.

    Only ``name`` is required; any other static attribute found in the
    dataset is kept as an extra field.
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(..., min_length=1, description="Display name in katakana")
    national_dex: int | None = Field(default=None, description="National Pokédex number")


class RaidQuery(BaseModel):
    """The current search form: who we are fighting and how hard the raid is.

    ``tera_type`` and ``raid_rank`` only ever hold enumeration members, but the
    name and type may still be blank while the form is being filled in.
    """
    target_name: str = Field(default="", description="Opponent name as entered")
    tera_type: TeraType | None = Field(default=None, description="Opponent Tera type")
    raid_rank: RaidRank = Field(default_factory=RaidRank.default, description="Raid difficulty")

    def missing_fields(self) -> list[str]:
        """Names of the required fields that are still blank."""
        missing = []
        if not self.target_name.strip():
            missing.append("target_name")
        if self.tera_type is None:
            missing.append("tera_type")
        return missing


class Recommendation(BaseModel):
    """One counter suggestion returned by the model.

    The model is asked to answer with Japanese keys; those are the aliases
    here. The English field names are accepted too.
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="名前", description="Suggested creature")
    held_item: str = Field(..., alias="もちもの", description="Recommended held item")
    rationale: str = Field(..., alias="理由", description="Why it works against this raid")
    moves: list[str] = Field(..., alias="技", description="Move set, in slot order")
    plan: list[str] = Field(..., alias="チャート", description="Turn-by-turn strategy steps")
