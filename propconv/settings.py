# -*- coding: utf-8 -*-
"""
propconv.settings
~~~~~~~~~~~~~~~~~


"""

from __future__ import annotations

import logging.config
import os
import shutil
import sys
from pathlib import Path
from typing import Any, Optional

from propconv.core import Configurations


class Settings(Configurations):
    # noinspection PyProtectedMember
    def __init__(
        self,
        name: str = "propconv",
        conf_file: str = "settings.conf",
        conf_dir: Optional[str | Path] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(conf_file, conf_dir, kwargs)
        self.set("name", name, replace=False)
        self._load(require=False)
        self._load_logging()

    def __getattr__(self, attr):
        # __getattr__ gets called when the item is not found via __getattribute__
        # To avoid recursion, call __getattribute__ directly to get the configurations dict
        configs = Configurations.__getattribute__(self, f"_{Configurations.__name__}__configs")
        if attr in configs.keys():
            return configs[attr]
        raise AttributeError(f"'{type(self).__name__}' object has no configuration '{attr}'")

    def _load_logging(self) -> None:
        logging_file = os.path.join(self.dir, "logging.conf")
        if not os.path.isfile(logging_file):
            logging_default = logging_file.replace("logging.conf", "logging.default.conf")
            if os.path.isfile(logging_default):
                shutil.copy(logging_default, logging_file)

        if os.path.isfile(logging_file):
            logging.config.fileConfig(logging_file, disable_existing_loggers=False)
        else:
            handler_console = logging.StreamHandler(sys.stdout)
            handler_console.setLevel(logging.INFO)
            handler_console.setFormatter(
                logging.Formatter("%(asctime)s.%(msecs)03d - %(name)s - %(message)s", "%Y-%m-%d %H:%M:%S")
            )
            logging.basicConfig(
                force=True,
                level=self.get("log_level", "INFO").upper(),
                handlers=[handler_console],
            )
