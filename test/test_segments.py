import powerprompt.object.facts
import powerprompt.segments

import test_base

TEST = test_base.TEST
case = test_base.case
Color = test_base.Color
ColorPair = test_base.ColorPair
Part = test_base.Part
Segment = test_base.Segment
PathState = powerprompt.object.facts.PathState
GitStatus = powerprompt.object.facts.GitStatus
HgStatus = powerprompt.object.facts.HgStatus
HostState = powerprompt.object.facts.HostState
BatteryState = powerprompt.object.facts.BatteryState
WEIGHTS = powerprompt.segments.WEIGHTS

THEME = test_base.theme()
COLORS = THEME.colors
ICONS = THEME.icons


def dirty(*texts):
    return [Part(text, requires_escaping=True) for text in texts]


def cwd(*parts):
    return Segment(COLORS.cwd, parts, WEIGHTS['cwd'])


def home():
    return Segment(COLORS.cwd_home, dirty('~'), WEIGHTS['cwd'])


def path_segments(path, max_length=0):
    return powerprompt.segments.path_segments(PathState.from_path(path, '/home/jao'), THEME, max_length)


@case
def test_path_root():
    TEST.check_ok('/', [cwd(*dirty('/'))], path_segments('/'))


@case
def test_path_root_one():
    TEST.check_ok('/gocode', [cwd(*dirty('gocode'))], path_segments('/gocode'))


@case
def test_path_root_two():
    TEST.check_ok('/gocode/src', [cwd(*dirty('gocode', 'src'))], path_segments('/gocode/src'))


@case
def test_path_root_three():
    TEST.check_ok('/gocode/src/github.com',
                  [cwd(Part('gocode', requires_escaping=True),
                       Part(ICONS.ellipsis),
                       Part('github.com', requires_escaping=True))],
                  path_segments('/gocode/src/github.com'))


@case
def test_path_home():
    TEST.check_ok('~', [home()], path_segments('/home/jao'))
    TEST.check_ok('~/', [home()], path_segments('/home/jao/'))


@case
def test_path_home_one():
    TEST.check_ok('~/gocode', [home(), cwd(*dirty('gocode'))], path_segments('/home/jao/gocode'))


@case
def test_path_home_two():
    TEST.check_ok('~/gocode/src',
                  [home(), cwd(*dirty('gocode', 'src'))],
                  path_segments('/home/jao/gocode/src'))


@case
def test_path_home_three():
    TEST.check_ok('~/gocode/src/github.com',
                  [home(),
                   cwd(Part('gocode', requires_escaping=True),
                       Part(ICONS.ellipsis),
                       Part('github.com', requires_escaping=True))],
                  path_segments('/home/jao/gocode/src/github.com'))


@case
def test_path_home_five_truncated():
    TEST.check_ok('~/gocode/src/github.com/wm/powerline-shell-go',
                  [home(),
                   cwd(Part('gocode', requires_escaping=True),
                       Part(ICONS.ellipsis),
                       Part('power…ll-go', requires_escaping=True))],
                  path_segments('/home/jao/gocode/src/github.com/wm/powerline-shell-go', max_length=12))


@case
def test_path_not_under_home():
    # A sibling of the home directory with the same prefix is not under home.
    TEST.check_ok('/home/jaox', [cwd(*dirty('home', 'jaox'))], path_segments('/home/jaox'))


@case
def test_path_ellipsis_count():
    for depth in range(0, 8):
        path = '/' + '/'.join(f'd{i}' for i in range(depth))
        segments = path_segments(path)
        ellipses = sum(1 for segment in segments for part in segment.parts if part.text == ICONS.ellipsis)
        intermediate = max(depth - 1, 0)
        TEST.check_ok(f'ellipses in {path}', 1 if intermediate >= 2 else 0, ellipses)
        TEST.check_ok(f'parts in {path}', min(max(depth, 1), 3), len(segments[-1].parts))


@case
def test_path_component_truncation():
    TEST.check_ok('max 3 does not truncate',
                  [cwd(*dirty('abcdefghij'))],
                  path_segments('/abcdefghij', max_length=3))
    TEST.check_ok('short enough',
                  [cwd(*dirty('abcdefghij'))],
                  path_segments('/abcdefghij', max_length=10))
    TEST.check_ok('max 8',
                  [cwd(*dirty('abc…hij'))],
                  path_segments('/abcdefghij', max_length=8))
    TEST.check_ok('max 9',
                  [cwd(*dirty('abc…hij'))],
                  path_segments('/abcdefghij', max_length=9))


def git(branch='master', **kwargs):
    return powerprompt.segments.git_segments(GitStatus(branch, **kwargs), THEME)


def git_segment(colors, *texts):
    return [Segment(colors, dirty(*texts), WEIGHTS['git'])]


@case
def test_git_clean():
    TEST.check_ok('clean master', git_segment(COLORS.git_default, 'master'), git())
    TEST.check_ok('clean branch',
                  git_segment(COLORS.git_default, f'{ICONS.branch} feature'),
                  git('feature'))
    TEST.check_ok('detached',
                  git_segment(COLORS.git_default, f'{ICONS.detached} 1a2b3c4'),
                  git('1a2b3c4', detached=True))


@case
def test_git_changes():
    TEST.check_ok('not staged',
                  git_segment(COLORS.git_changed,
                              'master',
                              ICONS.added,
                              ICONS.modified,
                              ICONS.untracked,
                              '2' + ICONS.removed,
                              ICONS.conflicted),
                  git(added=1, modified=1, removed=2, untracked=1, conflicted=1))
    TEST.check_ok('many',
                  git_segment(COLORS.git_changed,
                              'master',
                              '3' + ICONS.added,
                              '10' + ICONS.modified,
                              '2' + ICONS.renamed),
                  git(added=3, modified=10, renamed=2))
    for category in ('added', 'modified', 'removed', 'untracked', 'renamed', 'conflicted'):
        segments = git(**{category: 1})
        TEST.check_ok(f'{category} color', COLORS.git_changed.background, segments[0].background)
        TEST.check_ok(f'{category} one chip', 2, len(segments[0].parts))


@case
def test_git_ahead_behind():
    TEST.check_ok('ahead 1',
                  git_segment(COLORS.git_changed, 'master', ICONS.ahead),
                  git(ahead=1))
    TEST.check_ok('ahead 3',
                  git_segment(COLORS.git_changed, 'master', '3' + ICONS.ahead),
                  git(ahead=3))
    TEST.check_ok('behind 1',
                  git_segment(COLORS.git_changed, 'master', ICONS.behind),
                  git(behind=1))
    TEST.check_ok('diverged',
                  git_segment(COLORS.git_changed, 'master', f'2{ICONS.ahead} 5{ICONS.behind}', ICONS.modified),
                  git(ahead=2, behind=5, modified=1))


def hg(branch='default', **kwargs):
    return powerprompt.segments.hg_segments(HgStatus(branch, **kwargs), THEME)


@case
def test_hg():
    TEST.check_ok('clean default',
                  [Segment(COLORS.hg_default, dirty('default'), WEIGHTS['hg'])],
                  hg())
    TEST.check_ok('branch with phases and changes',
                  [Segment(COLORS.hg_changed,
                           dirty(f'{ICONS.branch} stable', '4' + ICONS.phases, ICONS.modified, '2' + ICONS.untracked),
                           WEIGHTS['hg'])],
                  hg('stable', phases=4, modified=1, untracked=2))
    TEST.check_ok('bookmark',
                  [Segment(COLORS.hg_default, dirty('default mybook', ICONS.phases), WEIGHTS['hg'])],
                  hg(bookmark='mybook', phases=1))


@case
def test_virtualenv():
    TEST.check_ok('no virtualenv', [], powerprompt.segments.virtualenv_segments(None, THEME))
    TEST.check_ok('empty virtualenv', [], powerprompt.segments.virtualenv_segments('', THEME))
    TEST.check_ok('virtualenv',
                  [Segment(COLORS.virtualenv, dirty('MyVirtEnv'), WEIGHTS['virtualenv'])],
                  powerprompt.segments.virtualenv_segments('MyVirtEnv', THEME))


@case
def test_lock():
    TEST.check_ok('writable', [], powerprompt.segments.lock_segments(True, THEME))
    TEST.check_ok('read only',
                  [Segment(COLORS.lock, [Part(ICONS.read_only)], WEIGHTS['lock'])],
                  powerprompt.segments.lock_segments(False, THEME))


@case
def test_return_code():
    TEST.check_ok('0', [], powerprompt.segments.return_code_segments(0, THEME))
    TEST.check_ok('127',
                  [Segment(COLORS.returncode, [Part('127')], WEIGHTS['returncode'])],
                  powerprompt.segments.return_code_segments(127, THEME))


@case
def test_battery():
    TEST.check_ok('warning off', [], powerprompt.segments.battery_segments(BatteryState(5), THEME, 0))
    TEST.check_ok('above threshold', [], powerprompt.segments.battery_segments(BatteryState(21), THEME, 20))
    TEST.check_ok('at threshold',
                  [Segment(COLORS.battery, [Part('20%')], WEIGHTS['battery'])],
                  powerprompt.segments.battery_segments(BatteryState(20), THEME, 20))
    TEST.check_ok('below threshold',
                  [Segment(COLORS.battery, [Part('7%')], WEIGHTS['battery'])],
                  powerprompt.segments.battery_segments(BatteryState(7), THEME, 20))


@case
def test_hostname():
    TEST.check_ok('with username',
                  [Segment(ColorPair(16, 12), dirty('jao@myhost'), WEIGHTS['hostname'])],
                  powerprompt.segments.hostname_segments(HostState('myhost', 'jao'), THEME))
    TEST.check_ok('truncated',
                  [Segment(COLORS.hostname, dirty('buil…t-42'), WEIGHTS['hostname'])],
                  powerprompt.segments.hostname_segments(HostState('build-host-42'), THEME, max_length=10))
    # sum of character codes of 'abc' = 294
    TEST.check_ok('colorized',
                  [Segment(ColorPair(16, 294 % 256), dirty('abc'), WEIGHTS['hostname'])],
                  powerprompt.segments.hostname_segments(HostState('abc'), THEME, colorize=True))


@case
def test_dollar():
    TEST.check_ok('bash',
                  [Segment(COLORS.dollar, [Part('\\$')], Segment.DOLLAR_WEIGHT)],
                  powerprompt.segments.dollar_segments(THEME))
    TEST.check_ok('zsh',
                  [Segment(COLORS.dollar, [Part('%#')], Segment.DOLLAR_WEIGHT)],
                  powerprompt.segments.dollar_segments(test_base.theme('zsh')))


if __name__ == '__main__':
    test_base.run_all('test_segments',
                      test_path_root,
                      test_path_root_one,
                      test_path_root_two,
                      test_path_root_three,
                      test_path_home,
                      test_path_home_one,
                      test_path_home_two,
                      test_path_home_three,
                      test_path_home_five_truncated,
                      test_path_not_under_home,
                      test_path_ellipsis_count,
                      test_path_component_truncation,
                      test_git_clean,
                      test_git_changes,
                      test_git_ahead_behind,
                      test_hg,
                      test_virtualenv,
                      test_lock,
                      test_return_code,
                      test_battery,
                      test_hostname,
                      test_dollar)
