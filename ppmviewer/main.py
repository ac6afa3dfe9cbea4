"""Точка входа в приложение."""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from ppmviewer.app import PPMViewerApp


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ppmviewer", description="Просмотр изображений PPM (P3/P6)")
    parser.add_argument("path", nargs="?", default=None, help="PPM-файл для открытия при старте")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="уровень логирования (DEBUG также выводит дамп начала файла при ошибках)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Создаёт и запускает главное окно приложения."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = PPMViewerApp(file_path=args.path)
    app.mainloop()


if __name__ == "__main__":
    main()
