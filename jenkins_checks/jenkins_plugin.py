#  vim:ts=4:sts=4:sw=4:et
#
#  Author: Hari Sekhon
#  Date: 2026-10-16 10:12:41 +0100 (Fri, 16 Oct 2026)
#
#  https://github.com/harisekhon/nagios-plugins
#
#  License: see accompanying Hari Sekhon LICENSE file
#
#  If you're using my code you're welcome to connect with me on LinkedIn
#  and optionally send me feedback to help steer this or other code I publish
#
#  https://www.linkedin.com/in/harisekhon
#

"""

Jenkins Nagios Plugin base class

Takes the Jenkins base url as the single positional argument (or $JENKINS_URL) instead of --host / --port,
adds the auth / proxy / TLS options, performs one GET of <url><path><query> via RequestHandler and passes the
decoded JSON to parse_json() in the subclass

Credentials fall back to $JENKINS_USER and $JENKINS_PASSWORD / $JENKINS_TOKEN

"""

import json
import logging
import os
import re
import time
import traceback
import requests
from requests.auth import HTTPBasicAuth
import urllib3
from harisekhon import NagiosPlugin
from harisekhon import RequestHandler
from harisekhon.utils import log, log_option, validate_url, support_msg_api, prog, UnknownError

__author__ = 'Hari Sekhon'
__version__ = '0.4.0'


# pylint: disable=too-many-instance-attributes
class JenkinsNagiosPlugin(NagiosPlugin):

    def __init__(self):
        # Python 2.x
        super(JenkinsNagiosPlugin, self).__init__()
        # Python 3.x
        # super().__init__()
        self.name = 'Jenkins'
        self.path = '/api/json'
        self.query = ''
        self.url = None
        self.api_url = None
        self.user = None
        self.password = None
        self.proxy = None
        self.noproxy = False
        self.insecure = False
        self.query_time = None
        self.request = RequestHandler()
        # Override default RequestHandler() error handling, every transport failure is UNKNOWN
        self.request.check_response_code = self.check_response_code
        self.request.exception_handler = self.exception_handler
        self._CLI__parser.set_usage('{prog} [options] <jenkins_url>'.format(prog=prog))
        self.msg = 'Jenkins msg not defined yet'
        self.ok()

    def add_options(self):
        super(JenkinsNagiosPlugin, self).add_options()
        self.add_opt('-u', '--user', default=os.getenv('JENKINS_USER'),
                     help='Username for HTTP basic auth ($JENKINS_USER)')
        self.add_opt('-p', '--password', default=os.getenv('JENKINS_PASSWORD', os.getenv('JENKINS_TOKEN')),
                     help='Password or API token for HTTP basic auth ($JENKINS_PASSWORD, $JENKINS_TOKEN)')
        self.add_opt('--proxy', metavar='url', help='HTTP(S) proxy url (default: from $HTTP_PROXY / $HTTPS_PROXY)')
        self.add_opt('--noproxy', action='store_true', help='Do not use $HTTP_PROXY / $HTTPS_PROXY')
        self.add_opt('--insecure', action='store_true',
                     help='Allow insecure HTTPS connections (self signed, expired certificates etc)')
        self.add_opt('--noperfdata', action='store_true', help='Do not output perfdata')

    def process_options(self):
        super(JenkinsNagiosPlugin, self).process_options()
        self.user = self.get_opt('user')
        self.password = self.get_opt('password')
        log_option('user', self.user)
        # never log the password / token itself
        log.info('password set: %s', bool(self.password))
        self.proxy = self.get_opt('proxy')
        self.noproxy = self.get_opt('noproxy')
        if self.proxy and self.noproxy:
            self.usage('--proxy and --noproxy are mutually exclusive')
        if self.proxy:
            validate_url(self.proxy, 'proxy')
        log_option('noproxy', self.noproxy)
        self.insecure = self.get_opt('insecure')
        log_option('insecure', self.insecure)

    def process_args(self):
        if len(self.args) > 1:
            self.usage('too many arguments, expected only the Jenkins url')
        if self.args:
            self.url = self.args[0]
        else:
            self.url = os.getenv('JENKINS_URL')
        if not self.url:
            self.usage('Missing Jenkins url parameter (or $JENKINS_URL)')
        self.url = self.url.rstrip('/')
        if not re.match(r'^https?://', self.url, re.I):
            self.usage("invalid Jenkins url '{0}', must be an http:// or https:// url".format(self.url))
        validate_url(self.url, 'Jenkins')

    def check_response_code(self, req):
        if req.status_code < 200 or req.status_code > 299:
            status_line = '{0} {1}'.format(req.status_code, req.reason or '').strip()
            raise UnknownError('Failed retrieving {0} ({1})'.format(self.api_url, status_line))

    def exception_handler(self, exception):
        if isinstance(exception, requests.exceptions.Timeout):
            detail = 'request timed out: {0}'.format(exception)
        elif isinstance(exception, requests.exceptions.SSLError):
            detail = 'SSL error: {0}'.format(exception)
        elif isinstance(exception, requests.exceptions.ProxyError):
            detail = 'proxy error: {0}'.format(exception)
        else:
            detail = exception
        raise UnknownError('Failed retrieving {0} ({1})'.format(self.api_url, detail))

    def request_args(self):
        kwargs = {
            'headers': {'Accept': 'application/json'},
            # leave the framework's self timeout alarm room to fire after the request timeout
            'timeout': max(self.timeout - 1, 1),
        }
        if self.user and self.password:
            log.debug('using HTTP basic auth as user: %s', self.user)
            kwargs['auth'] = HTTPBasicAuth(self.user, self.password)
        if self.proxy:
            kwargs['proxies'] = {'http': self.proxy, 'https': self.proxy}
        elif self.noproxy:
            # None entries stop requests merging in $HTTP_PROXY / $HTTPS_PROXY
            kwargs['proxies'] = {'http': None, 'https': None}
        if self.insecure:
            log.debug('disabling TLS certificate verification')
            kwargs['verify'] = False
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        return kwargs

    def run(self):
        self.api_url = self.url + self.path + self.query
        start_time = time.time()
        req = self.request.get(self.api_url, **self.request_args())
        self.query_time = time.time() - start_time
        log.debug('query time: %.4f secs', self.query_time)
        try:
            json_data = json.loads(req.content)
        except ValueError as _:
            raise UnknownError('non-JSON response returned by Jenkins at {0}: {1}. {2}'
                               .format(self.api_url, _, support_msg_api()))
        try:
            self.parse_json(json_data)
        except (KeyError, TypeError):
            if log.isEnabledFor(logging.DEBUG):
                log.debug(traceback.format_exc())
            exception = traceback.format_exc().strip().split('\n')[-1]
            raise UnknownError('failed to parse expected json response from Jenkins API: {0}. {1}'
                               .format(exception, support_msg_api()))

    def set_verdict(self, status, msg, perfdata, long_output=None):
        """
        Sets the final status and message

        perfdata is a list of (name, value) pairs output on its own '|' line unless --noperfdata,
        long_output lines follow it
        """
        if status == 'CRITICAL':
            self.critical()
        elif status == 'WARNING':
            self.warning()
        self.msg = msg
        if perfdata and not self.get_opt('noperfdata'):
            self.msg += '\n|' + ' '.join(['{0}={1}'.format(name, value) for (name, value) in perfdata])
        for line in long_output or []:
            self.msg += '\n' + line

    def parse_json(self, json_data):
        raise NotImplementedError('parse_json() not implemented in {0}'.format(self.__class__.__name__))
