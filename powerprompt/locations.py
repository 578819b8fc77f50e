# This file is part of Powerprompt.
#
# Powerprompt is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation, either version 3 of the License, (or at your
# option) any later version.
#
# Powerprompt is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License
# along with Powerprompt.  If not, see <https://www.gnu.org/licenses/>.

import os
import pathlib


# Location structure -> interface
#
#     $XDG_CONFIG_HOME/powerprompt/               config()
#         config.json                             config_file()
#
# XDG_CONFIG_HOME defaults to ~/.config. POWERPROMPT_CONFIG names a config file
# explicitly, overriding config_file(). Nothing is ever created: a missing config file
# means that the defaults are used.

class Locations(object):
    POWERPROMPT_DIR_NAME = 'powerprompt'
    CONFIG_FILE_NAME = 'config.json'
    CONFIG_ENV_VAR = 'POWERPROMPT_CONFIG'

    def __init__(self, environ=None):
        if environ is None:
            environ = os.environ
        self.home = Locations.normalize_dir(environ.get('HOME', None))
        self.config_base = Locations.normalize_dir(
            environ.get('XDG_CONFIG_HOME', None),
            None if self.home is None else self.home / '.config')
        self.config_override = Locations.normalize_dir(environ.get(Locations.CONFIG_ENV_VAR, None))

    def __repr__(self):
        return f'Locations(home={self.home}, config={self.config_file()})'

    def config(self):
        return None if self.config_base is None else self.config_base / Locations.POWERPROMPT_DIR_NAME

    def config_file(self):
        if self.config_override is not None:
            return self.config_override
        config_dir = self.config()
        return None if config_dir is None else config_dir / Locations.CONFIG_FILE_NAME

    # Returns the first of provided, *defaults that is set, as a Path. An unset HOME is
    # not fatal, HOME is used only to shorten the displayed path.
    @staticmethod
    def normalize_dir(provided, *defaults):
        dir = provided if provided else None
        d = 0
        while dir is None and d < len(defaults):
            dir = defaults[d]
            d += 1
        if dir is None:
            return None
        if not isinstance(dir, pathlib.Path):
            dir = pathlib.Path(dir)
        return dir.expanduser()
