"""Tests for the front matter error taxonomy."""

import pytest

from yaml_front_matter.exceptions import FrontMatterError
from yaml_front_matter.exceptions import InvalidFrontMatterError
from yaml_front_matter.exceptions import MissingFrontMatterError
from yaml_front_matter.exceptions import UnterminatedFrontMatterError


class TestFrontMatterErrors:
    """Tests for the FrontMatterError hierarchy."""

    def test_all_subtypes_are_front_matter_errors(self) -> None:
        """All error subtypes can be caught as FrontMatterError."""
        errors = [
            MissingFrontMatterError(),
            UnterminatedFrontMatterError(),
            InvalidFrontMatterError("bad"),
        ]
        for err in errors:
            assert isinstance(err, FrontMatterError), f"{type(err).__name__} is not a FrontMatterError"
            assert isinstance(err, Exception)

    @pytest.mark.parametrize(
        ("err", "kind"),
        [
            (MissingFrontMatterError(), "missing"),
            (UnterminatedFrontMatterError(), "unterminated"),
            (InvalidFrontMatterError("bad"), "invalid"),
        ],
    )
    def test_kind_tags(self, err: FrontMatterError, kind: str) -> None:
        """Each subtype carries its kind tag."""
        assert err.kind == kind

    def test_default_messages(self) -> None:
        """Extraction errors have descriptive default messages."""
        assert str(MissingFrontMatterError()) == "No front matter block found"
        assert "closing '---'" in str(UnterminatedFrontMatterError())

    def test_invalid_wraps_detail(self) -> None:
        """InvalidFrontMatterError keeps the underlying diagnostic."""
        err = InvalidFrontMatterError("field required")
        assert err.detail == "field required"
        assert str(err) == "Invalid front matter: field required"

    def test_repr(self) -> None:
        """repr includes the message and kind."""
        err = MissingFrontMatterError("nothing here")
        assert repr(err) == "MissingFrontMatterError('nothing here', kind='missing')"
