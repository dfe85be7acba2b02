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

Shared code for the Jenkins Nagios Plugins, built on the harisekhon NagiosPlugin framework

"""

from jenkins_checks.jenkins_plugin import JenkinsNagiosPlugin

__author__ = 'Hari Sekhon'
__version__ = '0.4.0'

__all__ = ['JenkinsNagiosPlugin']
