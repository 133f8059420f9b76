# config/tools/validate_config.py

import sys           # for exit codes
from pprint import pprint  # for structured printing

# make src discoverable if running as a script
from pathlib import Path
# __file__ is .../config/tools/validate_config.py
# parents[2] is the project root; append ROOT/src
PROJECT_ROOT = Path(__file__).resolve().parents[2]
sys.path.append(str(PROJECT_ROOT / "src"))

from env.loader import load_nav_config  # import our loader


def main() -> None:
    """Load and print the resolved nav config, failing fast on errors."""
    try:
        config = load_nav_config()           # resolve config/nav.yaml
    except (OSError, ValueError) as e:
        print("Config validation FAILED:", file=sys.stderr)
        print(repr(e), file=sys.stderr)
        sys.exit(1)                          # non-zero exit: CI will mark as failed

    print("Config validation OK.")
    print("\nNav config:")
    pprint(config)


if __name__ == "__main__":
    main()  # run main() only when script is executed directly
