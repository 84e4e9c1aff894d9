"""Tests for the public package surface."""

import os
import subprocess
import sys
from pathlib import Path

import blockutils
from blockutils import InvalidInputError, Randomness, Token, coerce_string_list


def test_version():
    assert blockutils.__version__ == "0.1.0"


def test_public_exports():
    assert len(Randomness.generate_string(8, Randomness.NUMERIC)) == 8
    assert len(Token.generate(8)) == 8
    assert coerce_string_list("x") == ["x"]
    assert issubclass(InvalidInputError, blockutils.BlockUtilsError)
    assert not issubclass(blockutils.EntropySourceError, ValueError)


def test_import_ignores_invalid_cli_settings(tmp_path):
    """Importing and generating must not depend on BLOCKUTILS_* settings."""
    src_dir = Path(blockutils.__file__).resolve().parents[1]
    env = {
        **os.environ,
        "PYTHONPATH": str(src_dir),
        "BLOCKUTILS_DEFAULT_STRING_LENGTH": "0",
        "BLOCKUTILS_LOG_LEVEL": "nonsense",
    }

    result = subprocess.run(
        [sys.executable, "-c", "from blockutils import Token; print(Token.generate(4))"],
        cwd=tmp_path,
        env=env,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert len(result.stdout.strip()) == 4
