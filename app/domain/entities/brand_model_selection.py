"""Brand to model cascading selection entity."""

from dataclasses import dataclass, field
from typing import Optional, Protocol, Sequence

NO_BRAND = "no_brand"
BRAND_SELECTED = "brand_selected"
MODEL_SELECTED = "model_selected"


class ModelOption(Protocol):
    """Anything that looks like a car model row."""

    id: str
    brand_id: str


@dataclass
class BrandModelSelection:
    """
    Two-level brand -> model selection state machine.

    no_brand -> brand_selected -> model_selected. Selecting a brand always
    replaces the model options and clears the selected model; clearing the
    brand empties the model options.
    """

    brand_id: Optional[str] = None
    model_id: Optional[str] = None
    models: list[ModelOption] = field(default_factory=list)

    @property
    def step(self) -> str:
        """Get the current state name."""
        if self.brand_id is None:
            return NO_BRAND
        if self.model_id is None:
            return BRAND_SELECTED
        return MODEL_SELECTED

    def select_brand(self, brand_id: Optional[str], models: Sequence[ModelOption] = ()) -> None:
        """
        Select a brand (or clear it with None).

        Args:
            brand_id: Brand identifier, or None to return to no_brand
            models: Models loaded for that brand

        Raises:
            ValueError: If any model does not belong to the brand
        """
        self.model_id = None
        if not brand_id:
            self.clear_brand()
            return

        foreign = [model.id for model in models if model.brand_id != brand_id]
        if foreign:
            raise ValueError(f"Models {foreign} do not belong to brand {brand_id}")

        self.brand_id = brand_id
        self.models = list(models)

    def clear_brand(self) -> None:
        """Return to the initial state."""
        self.brand_id = None
        self.model_id = None
        self.models = []

    def select_model(self, model_id: Optional[str]) -> None:
        """
        Select a model among the loaded options (or clear it with None).

        Raises:
            ValueError: If no brand is selected or the model is not an option
        """
        if not model_id:
            self.model_id = None
            return
        if self.brand_id is None:
            raise ValueError("A brand must be selected before a model")
        if not self.has_model(model_id):
            raise ValueError(f"Model {model_id} does not belong to brand {self.brand_id}")
        self.model_id = model_id

    def has_model(self, model_id: str) -> bool:
        """Check whether a model is one of the loaded options."""
        return any(model.id == model_id for model in self.models)
