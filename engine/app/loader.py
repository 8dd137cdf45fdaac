from __future__ import annotations
import importlib
import logging
from pathlib import Path
import yaml
from typing import Dict, Any

log = logging.getLogger(__name__)

GAMES_DIR = Path(__file__).resolve().parents[2] / "games"


def resolve_game_root(game_id: str, games_dir: Path = GAMES_DIR) -> Path:
    game_root = games_dir / game_id
    if not game_root.is_dir():
        raise FileNotFoundError(f"No game folder named {game_id!r} in {games_dir}")
    return game_root


def load_game_manifest(game_root: Path) -> Dict[str, Any]:
    manifest = game_root / "manifest.yaml"
    if not manifest.exists():
        raise FileNotFoundError(f"Missing manifest.yaml in {game_root}")
    with open(manifest, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    log.debug("loaded manifest for %s: %s", game_root.name, data)
    return data


def load_game_module(game_root: Path):
    """
    Imports games.<id>.main and returns the module object.
    The module must define a get_game() -> Game factory.
    """
    main_py = game_root / "main.py"
    if not main_py.exists():
        raise FileNotFoundError(f"Missing main.py in {game_root}")
    module = importlib.import_module(f"games.{game_root.name}.main")
    if not hasattr(module, "get_game"):
        raise AttributeError("Game module must define get_game()")
    return module
