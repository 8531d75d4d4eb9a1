"""
에셋 위치를 찾는 유틸리티. PyInstaller 단일 파일 빌드에서는
번들이 임시 폴더(sys._MEIPASS)에 풀리므로 그쪽을 기준으로 삼는다.
"""
import sys
from pathlib import Path


def get_base_path() -> Path:
    if getattr(sys, 'frozen', False):
        return Path(sys._MEIPASS)
    return Path(__file__).resolve().parent


def get_asset_path(*parts: str) -> Path:
    """Join ``parts`` onto the bundled ``assets`` directory."""
    return get_base_path().joinpath("assets", *parts)
