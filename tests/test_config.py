import dataclasses

import pytest
from hypothesis import given, strategies as st

from preconditions.config import Settings


class TestSettings:
    def test_default_values(self):
        """Test that Settings has sensible defaults."""
        settings = Settings()
        assert settings.element_description == "Index"
        assert settings.position_description == "Position"
        assert settings.log_failures is False

    def test_custom_values(self):
        """Test that Settings accepts custom values."""
        settings = Settings(
            element_description="Row",
            position_description="Cursor",
            log_failures=True,
        )
        assert settings.element_description == "Row"
        assert settings.position_description == "Cursor"
        assert settings.log_failures is True

    def test_settings_are_frozen(self):
        """A checker's settings cannot be changed after construction."""
        settings = Settings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.log_failures = True

    @given(label=st.text(min_size=1, max_size=30))
    def test_any_label_is_kept_verbatim(self, label):
        """For any description label, Settings stores it unchanged."""
        settings = Settings(element_description=label, position_description=label)
        assert settings.element_description == label
        assert settings.position_description == label
