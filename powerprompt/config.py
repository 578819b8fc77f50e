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

"""Configuration: compiled-in defaults, overridden by an optional JSON file.

The configuration file is located by L{powerprompt.locations.Locations}. Its recognized keys are::

    {
        "showWritable": true,          "showVirtualEnv": true,
        "showCwd": true,               "showGit": true,
        "showHg": true,                "showReturnCode": true,
        "showHostname": true,          "showBattery": true,
        "showUsername": false,         "colorizeHostname": false,
        "sortByWeight": false,         "bold": false,
        "cwdMaxLength": 0,             "hostnameMaxLength": 0,
        "batteryWarn": 0,              "probeTimeout": 2,
        "colours": {
            "git": {"backgroundDefault": 17, "backgroundChanges": 21, "text": 251},
            "cwd": {"background": 40, "text": 237, "homeBackground": 31, "homeText": 15},
            ...
        },
        "icons": {
            "plain": {"branch": "...", ...},
            "fancy": {"branch": "...", ...}
        }
    }

Each key present in the file replaces the default, anything else keeps its default. Colors are
256-color palette indexes, given as ints or numeric strings. Unknown keys are ignored.
"""

import json

import powerprompt.exception
import powerprompt.object.color
import powerprompt.theme
import powerprompt.util

Color = powerprompt.object.color.Color
ColorPair = powerprompt.object.color.ColorPair


class Configuration(object):

    # JSON key -> attribute
    TOGGLES = {
        'showWritable': 'show_writable',
        'showVirtualEnv': 'show_virtualenv',
        'showCwd': 'show_cwd',
        'showGit': 'show_git',
        'showHg': 'show_hg',
        'showReturnCode': 'show_return_code',
        'showHostname': 'show_hostname',
        'showBattery': 'show_battery',
        'showUsername': 'show_username',
        'colorizeHostname': 'colorize_hostname',
        'sortByWeight': 'sort_by_weight',
        'bold': 'bold'
    }

    NUMBERS = {
        'cwdMaxLength': 'cwd_max_length',
        'hostnameMaxLength': 'hostname_max_length',
        'batteryWarn': 'battery_warn',
        'probeTimeout': 'probe_timeout'
    }

    # Numeric options that need not be integers. The others are lengths and percentages.
    FRACTIONAL = {'probeTimeout'}

    COLOURS = {
        'hg': {'backgroundDefault': 22, 'backgroundChanges': 64, 'text': 251},
        'git': {'backgroundDefault': 17, 'backgroundChanges': 21, 'text': 251},
        'cwd': {'background': 40, 'text': 237, 'homeBackground': 31, 'homeText': 15},
        'virtualenv': {'background': 35, 'text': 0},
        'returncode': {'background': 196, 'text': 16},
        'lock': {'background': 124, 'text': 254},
        'dollar': {'background': 240, 'text': 15},
        'battery': {'background': 196, 'text': 16},
        'hostname': {'background': 12, 'text': 16}
    }

    # JSON icon key -> Icons attribute
    ICONS = {
        'branch': 'branch',
        'ahead': 'ahead',
        'behind': 'behind',
        'added': 'added',
        'modified': 'modified',
        'removed': 'removed',
        'untracked': 'untracked',
        'renamed': 'renamed',
        'conflicted': 'conflicted',
        'detached': 'detached',
        'phases': 'phases',
        'readOnly': 'read_only',
        'ellipsis': 'ellipsis',
        'separator': 'separator',
        'separatorThin': 'separator_thin',
        'dollar': 'dollar'
    }

    def __init__(self):
        self.path = None
        self.show_writable = True
        self.show_virtualenv = True
        self.show_cwd = True
        self.show_git = True
        self.show_hg = True
        self.show_return_code = True
        self.show_hostname = True
        self.show_battery = True
        self.show_username = False
        self.colorize_hostname = False
        self.sort_by_weight = False
        self.bold = False
        self.cwd_max_length = 0
        self.hostname_max_length = 0
        self.battery_warn = 0
        self.probe_timeout = 2
        self.colours = {source: {key: Color(code) for key, code in table.items()}
                        for source, table in Configuration.COLOURS.items()}
        self.icons = {'plain': powerprompt.theme.Icons.defaults(fancy=False),
                      'fancy': powerprompt.theme.Icons.defaults(fancy=True)}

    def __repr__(self):
        settings = {attr: getattr(self, attr)
                    for attr in list(Configuration.TOGGLES.values()) + list(Configuration.NUMBERS.values())}
        return f'Configuration({self.path}, {settings})'

    # Configuration

    def update(self, data):
        self.check_object('configuration', data)
        for key, attr in Configuration.TOGGLES.items():
            if key in data:
                value = data[key]
                if type(value) is not bool:
                    self.fail(f'{key} must be true or false, not {value!r}')
                setattr(self, attr, value)
        for key, attr in Configuration.NUMBERS.items():
            if key in data:
                setattr(self, attr, self.number(key, data[key], key in Configuration.FRACTIONAL))
        colours = data.get('colours', {})
        self.check_object('colours', colours)
        for source, table in colours.items():
            if source in self.colours:
                self.check_object(f'colours.{source}', table)
                for key, value in table.items():
                    if key in self.colours[source]:
                        self.colours[source][key] = self.color(f'colours.{source}.{key}', value)
        icons = data.get('icons', {})
        self.check_object('icons', icons)
        for mode, table in icons.items():
            if mode in self.icons:
                self.check_object(f'icons.{mode}', table)
                for key, value in table.items():
                    if key in Configuration.ICONS:
                        if type(value) is not str:
                            self.fail(f'icons.{mode}.{key} must be a string, not {value!r}')
                        self.icons[mode][Configuration.ICONS[key]] = value
        return self

    def colors(self):
        def pair(source, text='text', background='background'):
            table = self.colours[source]
            return ColorPair(table[text], table[background])
        return powerprompt.theme.Colors(
            git_default=pair('git', background='backgroundDefault'),
            git_changed=pair('git', background='backgroundChanges'),
            hg_default=pair('hg', background='backgroundDefault'),
            hg_changed=pair('hg', background='backgroundChanges'),
            cwd=pair('cwd'),
            cwd_home=pair('cwd', text='homeText', background='homeBackground'),
            virtualenv=pair('virtualenv'),
            returncode=pair('returncode'),
            lock=pair('lock'),
            dollar=pair('dollar'),
            battery=pair('battery'),
            hostname=pair('hostname'))

    def theme(self, shell, fancy):
        templates = powerprompt.theme.ShellTemplates.for_shell(shell)
        icons = powerprompt.theme.Icons(**self.icons['fancy' if fancy else 'plain'])
        return powerprompt.theme.Theme(icons, self.colors(), templates)

    # Internal

    def fail(self, message):
        raise powerprompt.exception.ConfigurationException(self.path, message)

    def check_object(self, description, x):
        if not isinstance(x, dict):
            self.fail(f'{description} must be a JSON object, not {x!r}')

    def color(self, description, value):
        try:
            return Color.parse(value)
        except powerprompt.object.color.ColorError as e:
            self.fail(f'{description}: {e}')

    def number(self, description, value, fractional=False):
        if type(value) is str and value.strip().isdigit():
            value = int(value)
        if fractional:
            if type(value) not in (int, float):
                self.fail(f'{description} must be a number, not {value!r}')
        elif type(value) is not int:
            self.fail(f'{description} must be an integer, not {value!r}')
        return value

    @staticmethod
    def load(path):
        configuration = Configuration()
        configuration.path = path
        if path is None:
            return configuration
        try:
            with open(path, 'r') as file:
                text = file.read()
        except FileNotFoundError:
            powerprompt.util.trace(f'No configuration file at {path}, using defaults')
            return configuration
        except OSError as e:
            configuration.fail(f'unable to read: {e}')
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            configuration.fail(f'malformed JSON: {e}')
        powerprompt.util.trace(f'Loaded configuration from {path}')
        return configuration.update(data)
