"""
Bug Crossing 실행 파일 빌드 스크립트 (PyInstaller, 단일 파일 + 창 모드)
"""
from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)

APP_NAME = "BugCrossing"
ENTRY_SCRIPT = "bug_crossing.py"
BASE_OPTIONS = ("--onefile", "--windowed", "--clean")


def build_command(project_dir: Path) -> list[str]:
    """Assemble the pyinstaller argv, bundling ``assets/`` when present."""
    cmd = ["pyinstaller", f"--name={APP_NAME}", *BASE_OPTIONS]
    if (project_dir / "assets").is_dir():
        # --add-data 구분자는 OS마다 다르다 (Windows는 ';')
        cmd.append(f"--add-data=assets{os.pathsep}assets")
    cmd.append(ENTRY_SCRIPT)
    return cmd


def ensure_pyinstaller() -> None:
    try:
        import PyInstaller  # noqa: F401
    except ImportError:
        logger.info("installing pyinstaller")
        subprocess.check_call([sys.executable, "-m", "pip", "install", "pyinstaller"])


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    project_dir = Path(__file__).resolve().parent
    ensure_pyinstaller()

    cmd = build_command(project_dir)
    logger.info("running: %s", " ".join(cmd))
    try:
        subprocess.check_call(cmd, cwd=project_dir)
    except subprocess.CalledProcessError as e:
        logger.error("build failed: %s", e)
        return 1
    logger.info("built %s", project_dir / "dist" / APP_NAME)
    return 0


if __name__ == "__main__":
    sys.exit(main())
