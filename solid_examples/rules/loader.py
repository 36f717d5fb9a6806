from decimal import Decimal
from pathlib import Path

import yaml
from pydantic import ValidationError

from solid_examples.rules.models import Rules

DEFAULT_RULES_PATH = Path("rules.yaml")


def _strip_code_fences(content: str) -> str:
    """Return the first ```yaml block, or the whole content if there is none."""
    yaml_lines = []
    in_block = False
    found_block = False

    for line in content.splitlines():
        s_line = line.strip()
        if s_line.startswith("```yaml"):
            in_block = True
            found_block = True
            continue
        if in_block and s_line.startswith("```"):
            break

        if in_block:
            yaml_lines.append(line)

    if found_block:
        return "\n".join(yaml_lines)
    return content


def load_rules(path: Path = DEFAULT_RULES_PATH) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_strip_code_fences(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def invoice_rates_from_rules(rules: Rules) -> dict[str, tuple[str, Decimal]]:
    """Map lower-cased country name to (currency, tax_rate)."""
    return {
        country: (country_rules.currency, country_rules.tax_rate)
        for country, country_rules in rules.invoices.items()
    }
