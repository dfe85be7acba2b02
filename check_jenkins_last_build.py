#!/usr/bin/env python3
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

Nagios Plugin to check the last build result of all recently built Jenkins jobs via the Rest API

Only jobs whose last build started within the last --days (default: 1) are considered.
Disabled jobs and jobs that have never been built are ignored

Raises CRITICAL if any recent last build failed, otherwise WARNING if any is unstable

Outputs one line per recently built job after the status line, eg.

[SUCCESS] my-job
[FAILURE] my-other-job
[RUNNING] my-long-job

Perfdata: passed=<count> unstable=<count> failed=<count> running=<count>

The --password switch accepts either a password or an API token

"""

import sys
import time
import traceback
try:
    # pylint: disable=wrong-import-position
    from harisekhon.utils import log, log_option, plural, validate_int
    from jenkins_checks import JenkinsNagiosPlugin
    from jenkins_checks.classify import classify_last_builds, job_count_msg, severity
except ImportError:
    print(traceback.format_exc(), end='')
    sys.exit(4)

__author__ = 'Hari Sekhon'
__version__ = '1.9.0'


class CheckJenkinsLastBuild(JenkinsNagiosPlugin):

    def __init__(self):
        # Python 2.x
        super(CheckJenkinsLastBuild, self).__init__()
        # Python 3.x
        # super().__init__()
        self.path = '/api/json'
        self.query = '?tree=jobs[disabled,name,lastBuild[result,timestamp]]'
        self.days = 1

    def add_options(self):
        super(CheckJenkinsLastBuild, self).add_options()
        self.add_opt('--days', default=self.days, metavar='days',
                     help='Max days since the last build for a job to be checked (default: 1)')

    def process_options(self):
        super(CheckJenkinsLastBuild, self).process_options()
        self.days = self.get_opt('days')
        validate_int(self.days, 'days', 0)
        self.days = int(self.days)

    def parse_json(self, json_data):
        jobs = json_data['jobs']
        now_ms = int(time.time() * 1000)
        log_option('now (epoch millis)', now_ms)
        counts = classify_last_builds(jobs, self.days, now_ms)
        log.info('%s job%s built in the last %s day%s, %s stale, %s disabled, %s never built',
                 len(counts.report), plural(len(counts.report)), self.days, plural(self.days),
                 counts.stale, counts.disabled, counts.never_built)
        status = severity(counts.failed, counts.unstable)
        if status == 'CRITICAL':
            msg = job_count_msg(counts.failed, 'an error')
        elif status == 'WARNING':
            msg = job_count_msg(counts.unstable, 'an unstable')
        else:
            msg = 'All builds for the last {0} day{1} are ok'.format(self.days, plural(self.days))
        self.set_verdict(status, msg, [
            ('passed', counts.passed),
            ('unstable', counts.unstable),
            ('failed', counts.failed),
            ('running', counts.running),
        ], counts.report_lines)


def main():
    CheckJenkinsLastBuild().main()


if __name__ == '__main__':
    main()
