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

"""Command line interface::

    powerprompt [bash|zsh] [RETURN_CODE] [install]
    powerprompt version

Writes the prompt for the given shell, reflecting the exit status of the previous command, to
stdout. The shell's prompt variable is set from this output, see C{powerprompt bash install}.
"""

import os
import pathlib
import sys

import powerprompt.assembler
import powerprompt.config
import powerprompt.exception
import powerprompt.install
import powerprompt.locations
import powerprompt.probe
import powerprompt.renderer
import powerprompt.theme
import powerprompt.util
import powerprompt.version

DEFAULT_SHELL = 'bash'
VERSION_ARGS = ('version', 'build')
INSTALL_ARG = 'install'


class Arguments(object):

    def __init__(self, argv):
        self.version = False
        self.install = False
        self.shell = DEFAULT_SHELL
        self.return_code = 0
        if len(argv) > 0:
            if argv[0] in VERSION_ARGS:
                self.version = True
                return
            self.shell = argv[0]
        for arg in argv[1:3]:
            try:
                self.return_code = int(arg)
            except ValueError:
                if arg == INSTALL_ARG:
                    self.install = True

    def __repr__(self):
        return (f'Arguments(shell={self.shell}, return_code={self.return_code}, '
                f'install={self.install}, version={self.version})')


def program_path():
    program = sys.argv[0] if sys.argv and sys.argv[0] else 'powerprompt'
    path = pathlib.Path(program)
    # Running as python -m powerprompt.main
    if path.name in ('main.py', '__main__.py'):
        return f'{sys.executable} -m powerprompt.main'
    return path.resolve().as_posix() if path.exists() else program


# Returns the text to be written to stdout. Raises KillPromptException on fatal errors.
def run(argv, environ=None, sources=None):
    if environ is None:
        environ = os.environ
    args = Arguments(argv)
    powerprompt.util.trace(repr(args))
    if args.version:
        return powerprompt.version.build_identifier() + '\n'
    templates = powerprompt.theme.ShellTemplates.for_shell(args.shell)
    if args.install:
        return powerprompt.install.snippet(templates.shell, program_path())
    locations = powerprompt.locations.Locations(environ)
    configuration = powerprompt.config.Configuration.load(locations.config_file())
    theme = configuration.theme(templates.shell, powerprompt.probe.fancy(environ))
    if sources is None:
        sources = powerprompt.assembler.Sources(environ, timeout=configuration.probe_timeout)
    assembler = powerprompt.assembler.Assembler(configuration, theme, sources, args.return_code)
    renderer = powerprompt.renderer.Renderer(theme,
                                             set_title=powerprompt.probe.wants_title(environ),
                                             bold=configuration.bold)
    return renderer.render(assembler.segments())


def main():
    try:
        output = run(sys.argv[1:])
    except powerprompt.exception.KillPromptException as e:
        powerprompt.util.trace_current_exception()
        print(str(e))
        sys.exit(1)
    sys.stdout.write(output)
    sys.stdout.flush()


if __name__ == '__main__':
    main()
