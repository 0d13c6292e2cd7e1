"""Tests for crumb.samesite — SameSite enum."""

import pytest

from crumb.samesite import SameSite


class TestSameSite:
    def test_members(self) -> None:
        assert [m.value for m in SameSite] == ["Strict", "Lax", "None"]

    @pytest.mark.parametrize("member", list(SameSite))
    def test_formats_as_wire_spelling(self, member: SameSite) -> None:
        assert f"SameSite={member}" == f"SameSite={member.value}"

    def test_lookup_by_value(self) -> None:
        assert SameSite("None") is SameSite.NONE

    def test_lookup_is_case_sensitive(self) -> None:
        with pytest.raises(ValueError):
            SameSite("none")
