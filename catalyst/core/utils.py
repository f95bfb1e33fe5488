"""
Common utility functions for the Catalyst package.

This module provides utility functions used across the Catalyst package:
- File and directory operations
- Identifier generation
"""

import os
import re
import json
import uuid
import datetime
from typing import Any, Dict

def ensure_dir(path: str) -> str:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path (str): Directory path

    Returns:
        str: The directory path
    """
    os.makedirs(path, exist_ok=True)
    return path

def generate_unique_id(prefix: str = "") -> str:
    """
    Generate an opaque unique ID with optional prefix.

    Args:
        prefix (str, optional): ID prefix

    Returns:
        str: Unique ID
    """
    return f"{prefix}{uuid.uuid4().hex}"

def timestamp() -> str:
    """Current local time in ISO 8601 format."""
    return datetime.datetime.now().isoformat()

def save_json_file(data: Dict[str, Any], file_path: str, indent: int = 2) -> None:
    """
    Save data to a JSON file.

    Args:
        data (Dict[str, Any]): Data to save
        file_path (str): Path to save JSON file
        indent (int, optional): JSON indentation level
    """
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(file_path, 'w') as f:
        json.dump(data, f, indent=indent)

def sanitize_filename(filename: str, max_length: int = 60) -> str:
    """
    Turn free text (a concept headline, say) into a safe file name.

    Args:
        filename (str): Original text
        max_length (int): Maximum length of the result

    Returns:
        str: Sanitized filename
    """
    cleaned = re.sub(r'[<>:"/\\|?*\s]+', '_', filename.strip())
    cleaned = re.sub(r'[^\w.-]', '', cleaned).strip('._')
    return cleaned[:max_length] or "untitled"
