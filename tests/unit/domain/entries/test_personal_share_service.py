"""Tests for personal share resolution."""

from decimal import Decimal

import pytest

from ledgerlens.domain.entries.services import PersonalShareService, coerce_user_id
from tests.factories import make_expense


@pytest.fixture
def split_expense():
    """A 100.00 expense with a 40.00 share for user 7."""
    return make_expense(amount="100", shares=[("7", "40")], payer_id=3)


class TestCoerceUserId:
    """Tests for user id coercion."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (7, 7),
            ("7", 7),
            (" 7 ", 7),
            (7.0, 7),
            (7.5, None),
            ("seven", None),
            ("", None),
            (None, None),
            (True, None),
        ],
    )
    def test_coercion(self, value, expected):
        """Test ints and numeric strings coerce, anything else does not."""
        assert coerce_user_id(value) == expected


class TestResolve:
    """Tests for PersonalShareService.resolve."""

    def test_matching_share_in_personal_view(self, split_expense):
        """Test the personal view resolves to the viewer's share."""
        result = PersonalShareService.resolve(split_expense, True, 7)

        assert result.amount == Decimal("40")
        assert result.is_personal_share is True
        assert result.original_amount == Decimal("100")
        assert result.user_share.share_amount == Decimal("40")

    def test_no_matching_share_keeps_full_amount(self, split_expense):
        """Test an expense without the viewer's share keeps its full amount."""
        result = PersonalShareService.resolve(split_expense, True, 9)

        assert result.amount == Decimal("100")
        assert result.is_personal_share is False

    def test_string_user_id_matches_numeric_share(self):
        """Test a string user id matches a numeric share."""
        expense = make_expense(amount="100", shares=[(7, "25")])

        result = PersonalShareService.resolve(expense, True, "7")

        assert result.amount == Decimal("25")
        assert result.is_personal_share is True

    def test_not_personal_view_ignores_shares(self, split_expense):
        """Test shares are ignored outside the personal view."""
        result = PersonalShareService.resolve(split_expense, False, 7)

        assert result.amount == Decimal("100")
        assert result.is_personal_share is False

    @pytest.mark.parametrize("user_id", [None, ""])
    def test_missing_user_id_keeps_full_amount(self, split_expense, user_id):
        """Test a missing user id keeps the full amount."""
        result = PersonalShareService.resolve(split_expense, True, user_id)

        assert result.amount == Decimal("100")
        assert result.is_personal_share is False

    def test_non_numeric_user_id_never_matches(self, split_expense):
        """Test a non-numeric user id matches no share."""
        result = PersonalShareService.resolve(split_expense, True, "abc")

        assert result.is_personal_share is False

    def test_expense_without_shares(self):
        """Test an expense without shares keeps its full amount."""
        expense = make_expense(amount="12")

        result = PersonalShareService.resolve(expense, True, 7)

        assert result.amount == Decimal("12")
        assert result.is_personal_share is False


class TestIsPersonalExpense:
    """Tests for detecting personal-only expenses."""

    def test_single_share_of_payer(self):
        """Test a single share of the payer is personal."""
        expense = make_expense(shares=[("3", "15")], payer_id=3)

        assert PersonalShareService.is_personal_expense(expense) is True

    def test_single_share_of_someone_else(self):
        """Test a single share of another user is not personal."""
        expense = make_expense(shares=[("4", "15")], payer_id=3)

        assert PersonalShareService.is_personal_expense(expense) is False

    def test_split_between_several_users(self):
        """Test an expense split between users is not personal."""
        expense = make_expense(shares=[("3", "5"), ("4", "10")], payer_id=3)

        assert PersonalShareService.is_personal_expense(expense) is False

    def test_no_shares(self):
        """Test an expense without shares is not personal."""
        assert PersonalShareService.is_personal_expense(make_expense()) is False


class TestPersonalExpensesFromGroup:
    """Tests for reducing group expenses to the viewer's shares."""

    def test_keeps_only_expenses_with_a_share(self):
        """Test only expenses with the viewer's share are kept, at the share."""
        expenses = [
            make_expense(id=1, amount="100", shares=[("7", "40"), ("8", "60")]),
            make_expense(id=2, amount="50", shares=[("8", "50")]),
            make_expense(id=3, amount="20"),
        ]

        result = PersonalShareService.personal_expenses_from_group(expenses, 7)

        assert [e.id for e in result] == [1]
        assert result[0].amount == Decimal("40")

    def test_does_not_modify_input(self):
        """Test the input expenses are left unchanged."""
        expense = make_expense(amount="100", shares=[("7", "40")])

        PersonalShareService.personal_expenses_from_group([expense], "7")

        assert expense.amount == Decimal("100")

    def test_non_numeric_user_id_yields_nothing(self):
        """Test a non-numeric user id yields no expenses."""
        expense = make_expense(amount="100", shares=[("7", "40")])

        assert PersonalShareService.personal_expenses_from_group([expense], "x") == []
