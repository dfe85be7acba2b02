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

Nagios Plugin to check the status of all jobs on a Jenkins server via the Rest API

Counts jobs by their status color in a single API call:

    blue        passed
    red         failed
    yellow      unstable
    disabled    disabled

Other colors (not built, aborted, building etc) and items with no color such as folders only count towards
the total number of jobs.
Running is derived as the active (non-disabled) jobs that are not passed, failed or unstable

Raises CRITICAL if any job has failed, otherwise WARNING if any job is unstable

Perfdata: jobs=<count> passed=<count> unstable=<count> failed=<count> disabled=<count> running=<count>

The --password switch accepts either a password or an API token

"""

import sys
import traceback
try:
    # pylint: disable=wrong-import-position
    from harisekhon.utils import log, plural
    from jenkins_checks import JenkinsNagiosPlugin
    from jenkins_checks.classify import classify_job_colors, job_count_msg, severity
except ImportError:
    print(traceback.format_exc(), end='')
    sys.exit(4)

__author__ = 'Hari Sekhon'
__version__ = '1.9.0'


class CheckJenkins(JenkinsNagiosPlugin):

    def __init__(self):
        # Python 2.x
        super(CheckJenkins, self).__init__()
        # Python 3.x
        # super().__init__()
        self.path = '/api/json'
        self.query = '?tree=jobs[color,name]'

    def parse_json(self, json_data):
        jobs = json_data['jobs']
        counts = classify_job_colors(jobs)
        log.info('found %s job%s', counts.jobs, plural(counts.jobs))
        status = severity(counts.failed, counts.unstable)
        if status == 'CRITICAL':
            msg = job_count_msg(counts.failed, 'an error')
        elif status == 'WARNING':
            msg = job_count_msg(counts.unstable, 'an unstable')
        else:
            msg = 'All jobs are ok'
        self.set_verdict(status, msg, [
            ('jobs', counts.jobs),
            ('passed', counts.passed),
            ('unstable', counts.unstable),
            ('failed', counts.failed),
            ('disabled', counts.disabled),
            ('running', counts.running),
        ])


def main():
    CheckJenkins().main()


if __name__ == '__main__':
    main()
