import logging
import os
import subprocess
from shlex import join as shell_join

from django.core.files.temp import NamedTemporaryFile
from django.utils.encoding import smart_str

from cleancss_filter.conf import settings
from cleancss_filter.exceptions import (FilterError, FilterExecutionFailed,
                                        FilterTimeout, InterpreterNotFound)


logger = logging.getLogger("cleancss_filter.filters")

# What a shell reports when it cannot find the command to run
COMMAND_NOT_FOUND = 127


class FilterBase(object):
    """
    A base class for filters that does nothing.

    Filters take part in two phases: ``load`` is called when an asset is
    read, ``dump`` when it is written out. Both receive the asset and
    modify its content in place through ``get_content``/``set_content``.
    """
    def __init__(self, verbose=None):
        if verbose is None:
            verbose = settings.CLEANCSS_VERBOSE
        self.verbose = verbose
        self.logger = logger

    def load(self, asset):
        pass

    def dump(self, asset):
        pass


class ProcessFilter(FilterBase):
    """
    A filter subclass that is able to filter content via
    external commands.

    The content is written to a temporary file whose path is handed to
    ``get_command``; whatever the command prints to stdout replaces the
    asset's content.
    """
    def __init__(self, timeout=None, **kwargs):
        super().__init__(**kwargs)
        if timeout is None:
            timeout = settings.CLEANCSS_TIMEOUT
        self.timeout = timeout

    def get_command(self, infile):
        raise NotImplementedError

    def get_environment(self):
        # None lets the child inherit our environment
        return None

    def run(self, content):
        infile = NamedTemporaryFile(mode='wb', prefix='input')
        try:
            infile.write(content)
            infile.flush()
            command = self.get_command(infile.name)
            self.logger.debug("Running %s", shell_join(command))
            try:
                return subprocess.run(
                    command, stdin=subprocess.DEVNULL, stdout=subprocess.PIPE,
                    stderr=subprocess.PIPE, env=self.get_environment(),
                    timeout=self.timeout)
            except FileNotFoundError as e:
                raise InterpreterNotFound(
                    'Path to %s could not be resolved: %s' % (command[0], e))
            except subprocess.TimeoutExpired:
                raise FilterTimeout('%s did not finish within %s seconds: %s' %
                                    (self.__class__.__name__, self.timeout,
                                     shell_join(command)))
            except OSError as e:
                raise FilterError('Unable to apply %s (%r): %s' %
                                  (self.__class__.__name__, command, e))
        finally:
            infile.close()

    def dump(self, asset):
        content = asset.get_content()
        proc = self.run(content)

        if proc.returncode == COMMAND_NOT_FOUND:
            raise InterpreterNotFound(
                'Path to node executable could not be resolved: %s' %
                shell_join(proc.args))

        if proc.returncode != 0:
            raise FilterExecutionFailed(
                proc.args, proc.returncode,
                error_output=smart_str(proc.stderr, errors='replace'),
                output=smart_str(proc.stdout, errors='replace'),
                input=content)

        if self.verbose and proc.stderr:
            self.logger.debug(smart_str(proc.stderr, errors='replace'))

        asset.set_content(proc.stdout)


class NodeFilter(ProcessFilter):
    """
    Base for filters whose executable is a Node.js script.

    If ``node_binary`` is given the script is run through it, otherwise
    the script is expected to be executable on its own. ``node_paths``
    is exported to the child as ``NODE_PATH``.
    """
    def __init__(self, node_binary=None, node_paths=None, **kwargs):
        super().__init__(**kwargs)
        if node_binary is None:
            node_binary = settings.CLEANCSS_NODE_BINARY
        if node_paths is None:
            node_paths = settings.CLEANCSS_NODE_PATHS
        self.node_binary = node_binary
        self.node_paths = list(node_paths)

    def get_command_prefix(self, binary):
        if self.node_binary:
            return [self.node_binary, binary]
        return [binary]

    def get_environment(self):
        if not self.node_paths:
            return None
        env = os.environ.copy()
        env['NODE_PATH'] = os.pathsep.join(self.node_paths)
        return env
