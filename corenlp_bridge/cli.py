"""
corenlp-bridge command line.

Usage:
    corenlp-bridge languages                                   # Canonical languages and their tokens
    corenlp-bridge models --language fr                        # Model index of a language
    corenlp-bridge resolve --language fr --annotators tokenize,pos --set parse.maxlen=80
    corenlp-bridge doctor --language en --annotators tokenize,ssplit,pos,ner
"""

import os
import sys
import json
import argparse
from typing import Dict, List, Optional

from corenlp_bridge.core.domain.exceptions import DomainError
from corenlp_bridge.core.domain.resolver import is_readable
from corenlp_bridge.shared.container import Container, container as default_container
from corenlp_bridge.shared.logging_config import configure_logging
from corenlp_bridge.shared.observability import setup_observability

# Colors for terminal output
class Colors:
    HEADER = '\033[95m'
    GREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'

def log(msg, color=Colors.ENDC):
    print(f"{color}{msg}{Colors.ENDC}")

def _split_annotators(raw: str) -> List[str]:
    return [a.strip() for a in raw.split(",") if a.strip()]

def _parse_overrides(pairs: Optional[List[str]]) -> Dict[str, str]:
    overrides = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got '{pair}'")
        overrides[key.strip()] = value
    return overrides

# --- COMMANDS ---

def list_languages(container: Container) -> int:
    registry = container.language_registry()
    for lang in registry.supported():
        print(f"{lang.value:<10} {', '.join(registry.aliases(lang))}")
    return 0

def list_models(container: Container, language: str) -> int:
    profile = container.select_language_use_case().execute(language)
    resolver = container.configuration_resolver()
    for key, model_file in profile.model_files.items():
        print(f"{key:<24} {resolver.model_file_path(model_file)}")
    return 0

def resolve(container: Container, language: str, annotators: List[str], overrides: Dict[str, str]) -> int:
    """Prints the properties a pipeline would be built with. The JVM is not started."""
    profile = container.select_language_use_case().execute(language)
    config = container.configuration_resolver().resolve(profile, annotators, overrides)
    print(json.dumps(config.to_properties(), indent=2))
    return 0

def doctor(container: Container, language: str, annotators: List[str]) -> int:
    """Checks that every JAR and model file a pipeline needs is on disk."""
    log("\n🏥 CoreNLP resources", Colors.HEADER)
    settings = container.config()
    problems = 0

    for jar in settings.JAR_FILES:
        if os.path.isfile(jar):
            log(f"   ✅ {jar}", Colors.GREEN)
        else:
            log(f"   ❌ {jar}", Colors.FAIL)
            problems += 1

    resolver = container.configuration_resolver()
    profile = resolver.select_language(language)
    for name in annotators:
        if resolver.catalog.is_family(name) and not profile.has_family(name):
            log(f"   ⚠️  no '{name}' model for {profile.language.value}", Colors.WARNING)
            if resolver.strict:
                problems += 1

    for model_file in profile.files_for(annotators):
        path = resolver.model_file_path(model_file)
        if is_readable(path):
            log(f"   ✅ {path}", Colors.GREEN)
        else:
            log(f"   ❌ {path}", Colors.FAIL)
            problems += 1

    if problems:
        log(f"\n{problems} problem(s) found.", Colors.FAIL)
        return 1
    log("\nAll resources present.", Colors.GREEN)
    return 0

def main(argv: Optional[List[str]] = None, container: Optional[Container] = None) -> int:
    container = container or default_container

    parser = argparse.ArgumentParser(prog="corenlp-bridge", description="Stanford CoreNLP configuration tools")
    parser.add_argument("--log-format", default=None, help="'json' or 'console'")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Languages
    subparsers.add_parser("languages", help="List supported languages")

    # Models
    models_parser = subparsers.add_parser("models", help="List the model files of a language")
    models_parser.add_argument("--language", "-l", default=None)

    # Resolve
    resolve_parser = subparsers.add_parser("resolve", help="Print resolved pipeline properties")
    resolve_parser.add_argument("--language", "-l", default=None)
    resolve_parser.add_argument("--annotators", "-a", required=True, help="Comma-separated annotators")
    resolve_parser.add_argument("--set", action="append", metavar="KEY=VALUE", help="Custom property")

    # Doctor
    doctor_parser = subparsers.add_parser("doctor", help="Check JARs and model files")
    doctor_parser.add_argument("--language", "-l", default=None)
    doctor_parser.add_argument("--annotators", "-a", default="tokenize,ssplit,pos,ner,parse")

    args = parser.parse_args(argv)

    # Default to help
    if not args.command:
        parser.print_help()
        return 0

    configure_logging(log_format=args.log_format)
    setup_observability()
    language = getattr(args, "language", None) or container.config().DEFAULT_LANGUAGE

    try:
        if args.command == "languages":
            return list_languages(container)

        elif args.command == "models":
            return list_models(container, language)

        elif args.command == "resolve":
            try:
                overrides = _parse_overrides(args.set)
            except argparse.ArgumentTypeError as e:
                parser.error(str(e))
            return resolve(container, language, _split_annotators(args.annotators), overrides)

        elif args.command == "doctor":
            return doctor(container, language, _split_annotators(args.annotators))

    except DomainError as e:
        log(f"❌ {e.message}", Colors.FAIL)
        return 1

    return 0

def run():
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        log("\n🛑 Aborted by user.", Colors.WARNING)
        sys.exit(130)

if __name__ == "__main__":
    run()
