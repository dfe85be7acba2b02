#  vim:ts=4:sts=4:sw=4:et
#
#  Author: Hari Sekhon
#  Date: 2026-10-16 10:12:41 +0100 (Fri, 16 Oct 2026)
#
#  https://github.com/harisekhon/nagios-plugins
#
#  License: see accompanying Hari Sekhon LICENSE file
#

import json
import signal
import sys
from unittest import mock
import pytest
import requests


def make_response(content, status_code=200, reason='OK', url='http://jenkins:8080/api/json'):
    if not isinstance(content, (str, bytes)):
        content = json.dumps(content)
    if isinstance(content, str):
        content = content.encode('utf-8')
    response = requests.models.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response._content = content  # pylint: disable=protected-access
    return response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ('JENKINS_URL', 'JENKINS_USER', 'JENKINS_PASSWORD', 'JENKINS_TOKEN'):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def cancel_alarm():
    """ the plugin framework arms a SIGALRM self timeout which must not fire in a later test """
    yield
    signal.alarm(0)


@pytest.fixture
def mock_request():
    """
    patches requests.Session.request, which every requests call goes through,
    set .return_value / .side_effect on the yielded mock
    """
    with mock.patch.object(requests.Session, 'request', autospec=True) as mocked:
        yield mocked


def request_kwargs(mocked):
    """ returns the keyword args of the last request including the url """
    (args, kwargs) = mocked.call_args
    kwargs = dict(kwargs)
    # autospec passes the session as the first positional arg, then method and url
    if len(args) > 2:
        kwargs['url'] = args[2]
    return kwargs


def run_plugin(plugin, argv):
    """ runs plugin.main() with the given command line args and returns the exit code """
    with mock.patch.object(sys, 'argv', [type(plugin).__name__] + list(argv)):
        with pytest.raises(SystemExit) as exc_info:
            plugin.main()
    return exc_info.value.code
