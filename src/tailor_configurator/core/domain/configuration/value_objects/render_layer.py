from dataclasses import dataclass

BASE_LAYER_KEY = "base"


@dataclass(frozen=True)
class RenderLayer:
    """One image asset plus its stacking order in the composited preview."""

    category_key: str
    image_ref: str
    z_index: int

    @property
    def is_base(self) -> bool:
        return self.category_key == BASE_LAYER_KEY
