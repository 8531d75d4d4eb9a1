"""
처리되지 않은 예외를 error_log.txt로 남기는 전역 예외 핸들러
(PyInstaller --windowed 빌드에서는 콘솔이 없어서 파일이 유일한 단서다)
"""
from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

ERROR_LOG_NAME = "error_log.txt"


def default_log_path() -> Path:
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).resolve().parent / ERROR_LOG_NAME
    return Path(__file__).resolve().parent / ERROR_LOG_NAME


def write_crash_log(path: Path, exc_type, exc_value, exc_traceback) -> Path:
    """예외 정보를 파일로 저장하고 그 경로를 돌려준다."""
    with open(path, "w", encoding="utf-8") as f:
        f.write("=" * 60 + "\n")
        f.write("오류 발생!\n")
        f.write("=" * 60 + "\n\n")
        f.write(f"오류 타입: {exc_type.__name__}\n")
        f.write(f"오류 메시지: {exc_value}\n\n")
        f.write("전체 트레이스백:\n")
        f.write("-" * 60 + "\n")
        traceback.print_exception(exc_type, exc_value, exc_traceback, file=f)
        f.write("\n" + "=" * 60 + "\n")
    return path


def install_crash_handler(log_path: Optional[Path] = None, *, wait_for_key: bool = False):
    """Replace ``sys.excepthook`` and return the installed handler."""
    target = log_path or default_log_path()

    def handle_exception(exc_type, exc_value, exc_traceback):
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc_value, exc_traceback)
            return

        try:
            write_crash_log(target, exc_type, exc_value, exc_traceback)
        except OSError as e:
            logger.error("could not write crash log %s: %s", target, e)
        else:
            logger.critical("unhandled %s, log saved to %s", exc_type.__name__, target)
        # 트레이스백 출력은 기본 훅에 맡긴다
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        if wait_for_key:
            print("\n아무 키나 누르면 종료됩니다...")
            try:
                input()
            except EOFError:
                pass

    sys.excepthook = handle_exception
    return handle_exception
