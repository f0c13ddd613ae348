"""Spec Loader reading OpenAPI documents from JSON and YAML files."""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

import yaml

from .document import DocumentBuilder
from .exceptions import DocumentError
from .models import Document


@dataclass
class LoadResult:
    """Result of loading an OpenAPI file."""

    success: bool
    document: Document = None
    error: str = None
    file_type: str = None  # 'json' or 'yaml'


class SpecLoader:
    """Loads OpenAPI specification files into typed documents."""

    def __init__(self, builder: DocumentBuilder = None):
        self.builder = builder or DocumentBuilder()

    def load(self, file_path: Union[str, Path]) -> LoadResult:
        """
        Load an OpenAPI specification file.

        Args:
            file_path: Path to the OpenAPI file (.json, .yaml, .yml)

        Returns:
            LoadResult with the built document or error information
        """
        file_path = Path(file_path)

        if not file_path.exists():
            return LoadResult(success=False, error=f"File not found: {file_path}")

        if not file_path.is_file():
            return LoadResult(success=False, error=f"Path is not a file: {file_path}")

        try:
            content = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            return LoadResult(success=False, error=f"Unable to read file as UTF-8: {e}")
        except OSError as e:
            return LoadResult(success=False, error=f"Error reading file: {e}")

        file_type = self._get_file_type(file_path)
        if file_type == "unknown":
            return LoadResult(success=False, error=f"Unsupported file extension: {file_path.suffix}")

        try:
            data = self._decode(content, file_type)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            return LoadResult(success=False, error=f"Invalid {file_type.upper()} format: {e}", file_type=file_type)

        try:
            document = self.builder.build(data)
        except DocumentError as e:
            return LoadResult(success=False, error=f"Malformed OpenAPI document: {e}", file_type=file_type)

        return LoadResult(success=True, document=document, file_type=file_type)

    def _get_file_type(self, file_path: Path) -> str:
        """Determine file type from extension."""
        extension = file_path.suffix.lower()
        if extension == ".json":
            return "json"
        elif extension in [".yaml", ".yml"]:
            return "yaml"
        else:
            return "unknown"

    def _decode(self, content: str, file_type: str) -> Any:
        if file_type == "json":
            return json.loads(content)
        return yaml.safe_load(content)
