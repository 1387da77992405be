"""Tests for the console front-ends, driven by scripted input."""

import io

import pytest

from app import bank_main, library_main
from pattern_demos.library import Catalog


def script(*lines):
    return io.StringIO("".join(f"{line}\n" for line in lines))


class TestBankShell:
    """Tests for the bank account demo."""

    def test_full_run(self, console, tmp_path):
        """Test the scripted session and the exception walkthrough."""
        log_path = tmp_path / "transaction_log.txt"
        code = bank_main.run(console=console, stream=script("100", "50", "30"), log_path=log_path)
        output = console.file.getvalue()

        assert code == 0
        assert "Bank Account Created: #123456" in output
        assert "Final balance: $120.0" in output
        assert "Caught exception: Cannot deposit negative amount: $-50.0" in output
        assert "Caught exception: Insufficient funds. Balance: $120.0, Withdrawal: $220.0" in output
        assert "Caught exception: Security limit exceeded" in output
        assert "Caught exception: Cannot deposit to a closed account" in output

        lines = log_path.read_text(encoding="utf-8").splitlines()
        assert lines == [
            "Transaction Log: Deposited $50.0 to account 123456. New balance: $150.0",
            "Transaction Log: Withdrew $30.0 from account 123456. New balance: $120.0",
            "Transaction Log: Account 123456 has been closed",
        ]

    def test_malformed_amount_reprompts(self, console, tmp_path):
        """Test non-numeric amounts are asked again."""
        code = bank_main.run(
            console=console,
            stream=script("lots", "100", "50", "30"),
            log_path=tmp_path / "log.txt",
        )
        output = console.file.getvalue()
        assert code == 0
        assert "Invalid input. Please enter an amount." in output
        assert "Final balance: $120.0" in output

    def test_negative_opening_balance_reprompts(self, console, tmp_path):
        """Test a negative opening balance is refused and asked again."""
        bank_main.run(console=console, stream=script("-5", "10", "0", "0"), log_path=tmp_path / "log.txt")
        output = console.file.getvalue()
        assert "Error: Cannot open an account with a negative balance" in output
        assert "Final balance: $10.0" in output

    def test_over_limit_withdrawal_reported(self, console, tmp_path):
        """Test a withdrawal over the ceiling is reported and the balance kept."""
        bank_main.run(console=console, stream=script("1000", "0", "600"), log_path=tmp_path / "log.txt")
        output = console.file.getvalue()
        assert "Caught exception: Security limit exceeded. Maximum withdrawal per transaction: $500.0" in output
        assert "Final balance: $1000.0" in output

    def test_input_ends_early(self, console, tmp_path):
        """Test running out of input exits with an error code."""
        code = bank_main.run(console=console, stream=script("100"), log_path=tmp_path / "log.txt")
        assert code == 1
        assert "Input ended." in console.file.getvalue()


class TestLibraryShell:
    """Tests for the library lending demo."""

    def run(self, console, *lines, catalog=None):
        code = library_main.run(console=console, stream=script(*lines), catalog=catalog)
        return code, console.file.getvalue()

    def test_seeded_catalog(self):
        """Test the sample books are created through the factory."""
        catalog = Catalog()
        library_main.seed_catalog(catalog)
        assert len(catalog) == 11
        assert catalog.genres == ["Fiction", "Mystery", "Sci-Fi", "Non-Fiction", "Romance"]

    def test_checkout_view_and_return(self, console):
        """Test borrowing, listing and returning a book."""
        code, output = self.run(console, "Ann", "2", "Dune", "4", "3", "dune", "4", "8")
        assert code == 0
        assert "Ann successfully checked out: Dune" in output
        assert "- Dune by Frank Herbert (Sci-Fi) - Checked Out" in output
        assert "Ann successfully returned: Dune" in output
        assert "You have no books checked out." in output
        assert "Thank you for using the Digital Library System!" in output

    def test_checkout_twice(self, console):
        """Test borrowing a held book is reported."""
        _, output = self.run(console, "Ann", "2", "Dune", "2", "Dune", "8")
        assert "Error: You have already checked out this book" in output

    def test_unknown_title(self, console):
        """Test a missing title is reported and the loop continues."""
        _, output = self.run(console, "Ann", "2", "Neuromancer", "8")
        assert "Error: Book 'Neuromancer' not found in library" in output
        assert "Thank you for using the Digital Library System!" in output

    def test_return_not_held(self, console):
        """Test returning a book the user does not hold."""
        _, output = self.run(console, "Ann", "2", "Dune", "3", "Sapiens", "8")
        assert "You don't have this book checked out" in output

    def test_invalid_menu_input(self, console):
        """Test non-numeric and out-of-range choices re-prompt."""
        _, output = self.run(console, "Ann", "abc", "9", "8")
        assert "Invalid input. Please enter a number." in output
        assert "Invalid choice. Please try again." in output

    def test_browse_sorts_and_filters(self, console):
        """Test browsing lists available books in the active order."""
        _, output = self.run(console, "Ann", "2", "1984", "1", "Fiction", "8")
        listing = output.split("Available books in Fiction:")[1]
        assert "1984" not in listing
        assert listing.index("Pride and Prejudice") < listing.index("To Kill a Mockingbird")

    def test_browse_by_author(self, console):
        """Test a changed sorting preference applies on the next browse."""
        _, output = self.run(console, "Ann", "5", "2", "1", "Fiction", "8")
        assert "Sorting preference set to Author" in output
        listing = output.split("Available books in Fiction:")[1]
        assert listing.index("1984") < listing.index("To Kill a Mockingbird")
        assert listing.index("To Kill a Mockingbird") < listing.index("Pride and Prejudice")

    def test_browse_empty_genre(self, console):
        """Test browsing a genre with nothing available."""
        _, output = self.run(console, "Ann", "1", "Poetry", "8")
        assert "No available books in this genre." in output

    def test_invalid_sort_choice(self, console):
        """Test an unknown sorting choice is reported."""
        _, output = self.run(console, "Ann", "5", "7", "8")
        assert "Invalid choice" in output

    def test_save_and_load(self, console, tmp_path):
        """Test saving then loading through the menu."""
        path = tmp_path / "state.txt"
        catalog = Catalog()
        _, output = self.run(console, "Ann", "2", "Dune", "6", str(path), "8", catalog=None)
        assert f"Library state saved successfully to {path}" in output
        assert "Dune,Frank Herbert,Sci-Fi,false" in path.read_text(encoding="utf-8").splitlines()

        _, output = self.run(console, "Bob", "7", str(path), "2", "Dune", "8", catalog=catalog)
        assert f"Library state loaded successfully from {path}" in output
        assert "Error: Book 'Dune' is not available for checkout" in output
        assert len(catalog) == 11

    def test_load_missing_file(self, console, tmp_path):
        """Test a failed load is reported and the session continues."""
        _, output = self.run(console, "Ann", "7", str(tmp_path / "missing.txt"), "8")
        assert "Error: Could not load catalog from" in output
        assert "Thank you for using the Digital Library System!" in output

    def test_input_ends(self, console):
        """Test the loop exits cleanly when input runs out."""
        code, output = self.run(console, "Ann")
        assert code == 0
        assert "Input ended." in output


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
