"""
Script CLI para validar SPL contra la política de guardrails.

Uso:
    python scripts/validate_spl.py "index=app error | stats count"
    cat queries.txt | python scripts/validate_spl.py
"""

import sys
from pathlib import Path

# Agregar root al path
sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse  # noqa: E402

from packages.spl_core import SplGuardrailValidator, SplPolicy  # noqa: E402
from packages.spl_core.config import get_settings  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Valida SPL con los guardrails de gobierno")
    parser.add_argument(
        "spl", type=str, nargs="*", help="SPL a validar (si se omite, se lee una por línea de stdin)"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Solo mostrar SPL inválidos"
    )

    args = parser.parse_args(argv)

    validator = SplGuardrailValidator(SplPolicy.from_settings(get_settings()))
    queries = args.spl or [line.rstrip("\n") for line in sys.stdin if line.strip()]

    invalid = 0
    for spl in queries:
        result = validator.validate(spl)
        if result.is_valid:
            if not args.quiet:
                print(f"✓ {spl}")
            continue

        invalid += 1
        print(f"✗ {spl}")
        for message in result.messages:
            print(f"    - {message}")

    if len(queries) > 1:
        print(f"\n{len(queries) - invalid}/{len(queries)} SPL válidos")

    return 1 if invalid else 0


if __name__ == "__main__":
    sys.exit(main())
