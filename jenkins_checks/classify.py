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

Classification of Jenkins job lists into status buckets

These are pure functions over the decoded 'jobs' list of the Jenkins JSON API, returning immutable counts.
Each job lands in exactly one bucket. Severity is derived from the counts alone:

    failed > 0      => CRITICAL
    unstable > 0    => WARNING
    otherwise       => OK

Malformed job records raise UnknownError rather than being silently skipped.
A job without a color (eg. a folder) is counted as an unrecognized color

"""

from collections import namedtuple
from enum import Enum
from harisekhon.utils import log, isDict, isInt, isList, plural, support_msg_api, UnknownError

__author__ = 'Hari Sekhon'
__version__ = '0.4.0'

MILLIS_PER_DAY = 24 * 60 * 60 * 1000


class JobColor(Enum):
    PASSED = 'blue'
    FAILED = 'red'
    UNSTABLE = 'yellow'
    DISABLED = 'disabled'
    # notbuilt, aborted, grey, *_anime (building) etc
    OTHER = None

    @classmethod
    def parse(cls, color):
        for member in cls:
            if member.value is not None and member.value == color:
                return member
        return cls.OTHER


class BuildResult(Enum):
    SUCCESS = 'SUCCESS'
    FAILURE = 'FAILURE'
    UNSTABLE = 'UNSTABLE'
    # Jenkins returns a null or blank result while the build is still in progress
    RUNNING = ''
    # ABORTED, NOT_BUILT etc
    OTHER = None

    @classmethod
    def parse(cls, result):
        if result is None or result == '':
            return cls.RUNNING
        for member in (cls.SUCCESS, cls.FAILURE, cls.UNSTABLE):
            if member.value == result:
                return member
        return cls.OTHER


class JobColorCounts(namedtuple('JobColorCounts', 'jobs passed unstable failed disabled other')):
    __slots__ = ()

    @property
    def active(self):
        return self.jobs - self.disabled

    @property
    def running(self):
        return self.active - self.passed - self.failed - self.unstable


class LastBuildCounts(namedtuple('LastBuildCounts',
                                 'passed unstable failed running other stale disabled never_built report')):
    """ report is a tuple of (label, job name) pairs for every fresh enabled job, in API order """
    __slots__ = ()

    @property
    def report_lines(self):
        return ['[{0}] {1}'.format(label, name) for (label, name) in self.report]


def severity(failed, unstable):
    if failed > 0:
        return 'CRITICAL'
    elif unstable > 0:
        return 'WARNING'
    return 'OK'


def _validate_jobs(jobs):
    if not isList(jobs):
        raise UnknownError("'jobs' field returned is not a list as expected! {0}".format(support_msg_api()))


def _get_field(job, field, index):
    if not isDict(job):
        raise UnknownError('job at index {0} is not a JSON object! {1}'.format(index, support_msg_api()))
    try:
        return job[field]
    except KeyError:
        raise UnknownError("'{0}' field not found for job at index {1}! {2}".format(field, index, support_msg_api()))


def classify_job_colors(jobs):
    """
    Buckets jobs by their 'color' field into a JobColorCounts

    Unrecognized colors are counted in 'other' and only contribute to the total job count
    """
    _validate_jobs(jobs)
    passed = unstable = failed = disabled = other = 0
    for index, job in enumerate(jobs):
        name = _get_field(job, 'name', index)
        # folders and other non-buildable items have no color
        color = job.get('color')
        log.debug("job: '%s' color=%s", name, color)
        job_color = JobColor.parse(color)
        if job_color is JobColor.PASSED:
            passed += 1
        elif job_color is JobColor.FAILED:
            failed += 1
        elif job_color is JobColor.UNSTABLE:
            unstable += 1
        elif job_color is JobColor.DISABLED:
            disabled += 1
        else:
            log.info("job '%s' color '%s' not classified", name, color)
            other += 1
    return JobColorCounts(jobs=len(jobs),
                          passed=passed,
                          unstable=unstable,
                          failed=failed,
                          disabled=disabled,
                          other=other)


def classify_last_builds(jobs, days, now_ms):
    """
    Buckets jobs by the result of their last build, ignoring jobs whose last build is older than
    the given number of days relative to now_ms (epoch millis), disabled jobs and jobs never built
    """
    _validate_jobs(jobs)
    if not isInt(days):
        raise UnknownError('days must be a non-negative integer')
    window_ms = int(days) * MILLIS_PER_DAY
    counts = dict.fromkeys(('passed', 'unstable', 'failed', 'running', 'other',
                            'stale', 'disabled', 'never_built'), 0)
    report = []
    for index, job in enumerate(jobs):
        name = _get_field(job, 'name', index)
        last_build = job.get('lastBuild')
        if last_build is None:
            log.debug("job '%s' has no last build, skipping", name)
            counts['never_built'] += 1
            continue
        if not isDict(last_build):
            raise UnknownError("'lastBuild' field for job '{0}' is not a JSON object! {1}"
                               .format(name, support_msg_api()))
        timestamp = last_build.get('timestamp')
        if not isInt(timestamp, allow_negative=True):
            raise UnknownError("invalid 'timestamp' returned in last build of job '{0}': {1}"
                               .format(name, timestamp))
        result = last_build.get('result')
        age = now_ms - int(timestamp)
        log.debug("job: '%s' disabled=%s result=%s age=%sms", name, job.get('disabled'), result, age)
        if age > window_ms:
            counts['stale'] += 1
            continue
        if job.get('disabled'):
            counts['disabled'] += 1
            continue
        build_result = BuildResult.parse(result)
        if build_result is BuildResult.SUCCESS:
            counts['passed'] += 1
        elif build_result is BuildResult.FAILURE:
            counts['failed'] += 1
        elif build_result is BuildResult.UNSTABLE:
            counts['unstable'] += 1
        elif build_result is BuildResult.RUNNING:
            counts['running'] += 1
        else:
            log.info("job '%s' last build result '%s' not classified", name, result)
            counts['other'] += 1
        label = 'RUNNING' if build_result is BuildResult.RUNNING else result
        report.append((label, name))
    return LastBuildCounts(report=tuple(report), **counts)


def job_count_msg(count, status):
    return '{0} job{1} {2} {3} status'.format(count,
                                              plural(count),
                                              'has' if count == 1 else 'have',
                                              status)
