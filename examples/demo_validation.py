#!/usr/bin/env python3
"""
Demo: validators and detailed error messages.

This demonstrates:
- The ready-made validators on a handful of inputs
- Accent- and case-insensitive search patterns
- Path-qualified messages from a pydantic model with optional fields
"""

import sys
from pathlib import Path
from typing import Any, List, Optional, Union

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import BaseModel, field_validator

from regex_utils import (
    is_alphanumeric,
    is_valid_email,
    is_valid_phone_number,
    is_valid_ssn,
    is_valid_url,
    make_detailed_validator,
    to_alphanumeric,
    transform_regex,
)


class Sample(BaseModel):
    required: Any
    string: Optional[str] = None
    number: Optional[float] = None
    boolean: Optional[bool] = None
    array: Optional[List[str]] = None
    union: Optional[Union[str, int]] = None

    @field_validator("required")
    @classmethod
    def required_present(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("required is missing")
        return value


def main():
    print("=" * 60)
    print("regex-utils Demo: Validators")
    print("=" * 60)

    inputs = ["hello_world-1", "jane.doe@gmail.com", "https://python.org", "(555) 123-4567", "123-45-6789"]
    for text in inputs:
        print(f"\n{text!r}")
        print(f"  alphanumeric: {is_alphanumeric(text)}")
        print(f"  slug:         {to_alphanumeric(text)}")
        print(f"  email:        {is_valid_email(text)}")
        print(f"  url:          {is_valid_url(text)}")
        print(f"  phone:        {is_valid_phone_number(text)}")
        print(f"  ssn:          {is_valid_ssn(text)}")

    print("\n" + "=" * 60)
    print("Accent-insensitive search")
    print("=" * 60)

    name = transform_regex("jose", accent_insensitive=True, case_insensitive=True)
    print(f"Pattern: {name}")
    for text in ["José", "JOSE", "Joseph", "Jase"]:
        print(f"  {text!r}: {name.test(text)}")

    print("\n" + "=" * 60)
    print("Detailed validation")
    print("=" * 60)

    check = make_detailed_validator(Sample, prefix="sample")
    for value in [
        {"required": 1},
        {"required": None, "number": "many"},
        {"required": 1, "array": ["a", 2, "c"], "boolean": "perhaps"},
    ]:
        result = check(value)
        print(f"\n{value}")
        if result is True:
            print("  ✓ valid")
        else:
            for message in [result] if isinstance(result, str) else result:
                print(f"  ✗ {message}")


if __name__ == "__main__":
    main()
