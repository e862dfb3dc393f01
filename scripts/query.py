"""
Script CLI para generar SPL desde preguntas en lenguaje natural
"""

import sys
from pathlib import Path

# Agregar root al path
sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse  # noqa: E402

from packages.spl_core import SplBlockedError, SplGenerationError, SplWhisperer  # noqa: E402
from packages.spl_core.config import get_settings  # noqa: E402
from packages.spl_core.logging_config import configure_logging  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description="Genera Splunk SPL validado con guardrails")
    parser.add_argument("question", type=str, nargs="?", help="Pregunta a realizar")
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Modo interactivo"
    )
    parser.add_argument(
        "--block",
        action="store_true",
        help="Rechazar SPL que no cumpla la política (default: solo avisar)",
    )

    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level, settings.log_file)

    whisperer = SplWhisperer(block_on_invalid=True if args.block else None)
    stats = whisperer.get_stats()

    print(f"SPL Whisperer - provider: {stats['llm_provider']} ({stats['llm_model']})")
    print("-" * 50)

    if args.interactive:
        print("Modo interactivo. Escribe 'salir' para terminar.\n")
        while True:
            question = input("\n📝 Tu pregunta: ").strip()
            if question.lower() in ["salir", "exit", "quit"]:
                print("¡Hasta luego!")
                break
            if not question:
                continue
            process_question(whisperer, question)
    elif args.question:
        process_question(whisperer, args.question)
    else:
        parser.print_help()


def process_question(whisperer: SplWhisperer, question: str):
    """Procesa una pregunta y muestra el SPL con sus notas"""
    try:
        result = whisperer.ask(question)
    except SplBlockedError as e:
        print(f"\n✗ SPL rechazado: {e.spl}")
        for message in e.validation.messages:
            print(f"   - {message}")
        return
    except (ValueError, SplGenerationError) as e:
        print(f"\n✗ Error: {e}")
        return

    print("\n" + "=" * 50)
    print("📌 SPL:")
    print("=" * 50)
    print(result.spl)

    sections = [
        ("EXPLICACIÓN", result.explanation),
        ("OPTIMIZACIONES", result.optimizations),
        ("GUARDRAILS", result.guardrails),
    ]
    for title, items in sections:
        if not items:
            continue
        print("\n" + "-" * 50)
        print(f"{title}:")
        print("-" * 50)
        for i, item in enumerate(items, 1):
            print(f"[{i}] {item}")

    status = "✓ válido" if result.is_valid else "⚠ no cumple la política"
    print(f"\nValidación: {status}")


if __name__ == "__main__":
    main()
