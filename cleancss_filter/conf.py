from numbers import Number

from django.conf import settings  # noqa
from django.core.exceptions import ImproperlyConfigured

from appconf import AppConf


class CleanCSSConf(AppConf):
    # Absolute path to the cleancss executable
    BINARY = '/usr/bin/cleancss'
    # Interpreter used to run BINARY, e.g. '/usr/bin/node'
    NODE_BINARY = None
    # Exported to the child process as NODE_PATH
    NODE_PATHS = []
    # Seconds to wait for the minifier, None waits forever
    TIMEOUT = None
    # Log the minifier's error stream even when it succeeds
    VERBOSE = False

    class Meta:
        prefix = 'cleancss'

    def configure_node_paths(self, value):
        if not isinstance(value, (list, tuple)):
            raise ImproperlyConfigured("The CLEANCSS_NODE_PATHS setting "
                                       "must be a list or tuple. Check for "
                                       "missing commas.")
        return list(value)

    def configure_timeout(self, value):
        if value is None:
            return value
        if isinstance(value, bool) or not isinstance(value, Number) or value <= 0:
            raise ImproperlyConfigured("The CLEANCSS_TIMEOUT setting must be "
                                       "a positive number of seconds or None.")
        return value
