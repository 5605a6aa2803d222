#!/usr/bin/env python3
"""Create template config tables for the movie method.

Writes actors.yaml (one unnamed actor per initial), sets.yaml (one set per
final with its five tone rooms) and props.yaml (starter props) into the
config directory. Fill in the names afterwards.

Usage:
    python scripts/init_config.py [--config DIR] [--force]

    --config DIR: Target directory (default: $HMM_CONFIG_DIR or ~/.config/hmm)
    --force: Overwrite existing tables
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hmm.common.config import CONFIG_FILENAMES, get_config_dir, write_default_config  # noqa: E402
from hmm.common.logging import log_error  # noqa: E402


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Create template actors.yaml, sets.yaml and props.yaml")
    parser.add_argument("--config", help="Config directory (default: $HMM_CONFIG_DIR or ~/.config/hmm)")
    parser.add_argument("--force", action="store_true", help="Overwrite existing config files")
    args = parser.parse_args(argv)

    config_dir = get_config_dir(args.config)
    existing = [name for name in CONFIG_FILENAMES if (config_dir / name).exists()]
    if existing and not args.force:
        log_error(f"Config already exists in {config_dir} ({', '.join(existing)}). Use --force to overwrite.")
        return 2

    try:
        written = write_default_config(config_dir)
    except OSError as e:
        log_error(f"Could not write config: {e}")
        return 2

    print(f"Created config in {config_dir}:")
    for path in written:
        print(f"  {path.name}")
    print()
    print("Next steps:")
    print("  1. Name your actors in actors.yaml (one per initial)")
    print("  2. Pick your sets in sets.yaml (one location per final)")
    print("  3. Add props for components in props.yaml")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
