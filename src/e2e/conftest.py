import pytest
from PIL import ImageFont


@pytest.fixture
def font():
    """Pillow's bundled scalable font; no system fonts needed."""
    f = ImageFont.load_default(size=20)
    if not isinstance(f, ImageFont.FreeTypeFont):
        pytest.skip("Pillow built without FreeType")
    return f
