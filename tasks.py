import os
from os.path import exists as path_exists

from invoke import task


VERBOSE = False

PROJECT_DIR = os.path.dirname(os.path.abspath(__file__))
PACKAGE_NAME = 'twitter_cursor_client'
API_KEYS_FILEPATH = os.environ.get('API_KEYS_FILEPATH', f"{PROJECT_DIR}/api-keys.json")


@task
def clean(ctx):
    with ctx.cd(PROJECT_DIR):
        ctx.run('rm -rf ./build ./.build *.egg-info')


@task
def test(ctx):
    with ctx.cd(PROJECT_DIR):
        ctx.run('python3 -m pytest', pty=True)


@task(pre=[clean])
def build(ctx):
    hide_output = None if VERBOSE else 'both'
    with ctx.cd(PROJECT_DIR):
        ctx.run('python3 -m pip wheel --no-deps --wheel-dir=.build/ .', hide=hide_output)


@task
def reciprocal(ctx, user):
    if not path_exists(API_KEYS_FILEPATH):
        exit(f'error: no api-keys.json file found: {API_KEYS_FILEPATH}')

    with ctx.cd(PROJECT_DIR):
        ctx.run(
            f'python3 examples/reciprocal.py {user}',
            env={'API_KEYS_FILEPATH': API_KEYS_FILEPATH}, pty=True
        )
