"""Centralized imports for the entire project (app + string_literal_finder)."""

# Standard library
from pathlib import Path
from typing import Dict, List, Optional

# External
from fastapi import HTTPException
