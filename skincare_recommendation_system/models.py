from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Enumerations ---
class SkinType(str, Enum):
    """Declaration order doubles as the tie-break priority."""

    DRY = "dry"
    OILY = "oily"
    COMBINATION = "combination"
    SENSITIVE = "sensitive"
    NORMAL = "normal"


class RoutineStep(str, Enum):
    CLEANSER = "cleanser"
    SERUM = "serum"
    MOISTURIZER = "moisturizer"
    SUNSCREEN = "sunscreen"


UNKNOWN_AGE_RANGE = "unknown"


def _to_text(value: Any) -> str:
    """Flatten a str | list | None field into one string."""
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value if v is not None)
    return str(value)


# --- Quiz Models ---
class SkinProfile(BaseModel):
    """Quiz-derived skin profile consumed by the recommendation engine."""

    model_config = ConfigDict(populate_by_name=True)

    # Unknown types stay plain strings and get the generic reason copy
    skin_type: Union[SkinType, str] = Field(alias="skinType", union_mode="left_to_right")
    concerns: List[str] = Field(default_factory=list)
    age_range: str = Field(default=UNKNOWN_AGE_RANGE, alias="ageRange")
    scores: Dict[str, int] = Field(default_factory=dict)

    @field_validator("skin_type", mode="before")
    @classmethod
    def _normalize_skin_type(cls, value: Any) -> Any:
        if isinstance(value, SkinType) or not isinstance(value, str):
            return value
        value = value.strip().lower()
        if not value:
            raise ValueError("skin type must not be empty")
        try:
            return SkinType(value)
        except ValueError:
            return value

    @field_validator("concerns", mode="before")
    @classmethod
    def _dedupe_concerns(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        return list(dict.fromkeys(str(c) for c in value if c))

    @property
    def skin_type_value(self) -> str:
        return self.skin_type.value if isinstance(self.skin_type, SkinType) else self.skin_type

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class QuizResult(BaseModel):
    """Answer texts for each quiz question (None when unanswered)."""

    skin_feeling: Optional[str] = None
    skin_concerns: Optional[str] = None
    oiliness_level: Optional[str] = None
    sensitivity: Optional[str] = None
    age_range: Optional[str] = None


# --- Catalogue Models ---
class Product(BaseModel):
    """Catalogue entry as supplied by the storefront backend. Read-only."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str
    name: str = ""
    category: str = ""
    subcategory: str = ""
    skin_type: str = Field(default="", alias="skinType")
    concerns: str = ""
    ingredients: Tuple[str, ...] = ()
    description: str = ""
    price: float = Field(default=0.0, ge=0)

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return value if value is None else str(value)

    @field_validator(
        "name", "category", "subcategory", "skin_type", "concerns", "description",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _to_text(value)

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value: Any) -> Any:
        return 0.0 if value in (None, "") else value

    @field_validator("ingredients", mode="before")
    @classmethod
    def _normalize_ingredients(cls, value: Any) -> Tuple[str, ...]:
        # "Niacinamide, Aloe" and ["Niacinamide", "Aloe"] normalize identically
        tokens = [t.strip().lower() for t in _to_text(value).split(",")]
        return tuple(t for t in tokens if t)

    @property
    def category_text(self) -> str:
        return f"{self.category} {self.subcategory}".lower()

    @property
    def ingredient_text(self) -> str:
        return ", ".join(self.ingredients)


# --- Recommendation Models ---
class RoutineItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: str = Field(alias="productId")
    name: str
    reason: str = ""

    @field_validator("product_id", mode="before")
    @classmethod
    def _coerce_product_id(cls, value: Any) -> Any:
        return value if value is None else str(value)


class Routine(BaseModel):
    """Four routine slots; a slot is None when nothing matched."""

    cleanser: Optional[RoutineItem] = None
    serum: Optional[RoutineItem] = None
    moisturizer: Optional[RoutineItem] = None
    sunscreen: Optional[RoutineItem] = None

    def get(self, step: RoutineStep) -> Optional[RoutineItem]:
        return getattr(self, step.value)

    def filled_steps(self) -> List[RoutineStep]:
        return [step for step in RoutineStep if self.get(step) is not None]


class RoutineRecommendation(BaseModel):
    """Standardized output of every recommendation path."""

    routine: Routine = Field(default_factory=Routine)
    summary: str = Field(min_length=1)

    @field_validator("summary", mode="before")
    @classmethod
    def _strip_summary(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")
