"""Tests for secure random byte generation."""

from unittest.mock import patch

import pytest
from gridlife.core.entropy import EntropyError, generate_random


class TestGenerateRandom:
    """Test cases for generate_random."""

    def test_length(self):
        """Test 32 bytes are returned."""
        data = generate_random()
        assert isinstance(data, bytes)
        assert len(data) == 32

    def test_calls_differ(self):
        """Test consecutive calls return fresh bytes."""
        assert generate_random() != generate_random()

    @patch("gridlife.core.entropy.secrets.token_bytes", side_effect=OSError("no entropy"))
    def test_source_failure(self, mock_token_bytes):
        """Test a failing source raises EntropyError."""
        with pytest.raises(EntropyError, match="no entropy"):
            generate_random()

    @patch("gridlife.core.entropy.secrets.token_bytes", return_value=b"\x00" * 4)
    def test_short_read(self, mock_token_bytes):
        """Test a short read raises EntropyError."""
        with pytest.raises(EntropyError):
            generate_random()
