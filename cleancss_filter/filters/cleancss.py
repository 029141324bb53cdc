from cleancss_filter.conf import settings
from cleancss_filter.filters import NodeFilter


class CleanCSSFilter(NodeFilter):
    """
    Minify css using clean-css (https://github.com/jakubpawlowicz/clean-css).

    All options are fixed at construction time; a flag is only passed to
    ``cleancss`` when its option is set.
    """
    # (attribute, flag, takes a value), in the order they are emitted
    flags = (
        ("keep_line_breaks", "--keep-line-breaks", False),
        ("remove_special_comments", "--s0", False),
        ("only_keep_first_special_comment", "--s1", False),
        ("root_path", "--root", True),
        ("skip_import", "--skip-import", False),
        ("skip_rebase", "--skip-rebase", False),
        ("skip_advanced", "--skip-advanced", False),
        ("skip_aggressive_merging", "--skip-aggressive-merging", False),
        # None or 0 leaves cleancss' default precision alone
        ("rounding_precision", "--rounding-precision", True),
        ("compatibility", "--compatibility", True),
        ("debug", "--debug", False),
    )

    def __init__(self, binary=None, node_binary=None,
                 keep_line_breaks=False, remove_special_comments=False,
                 only_keep_first_special_comment=False, root_path=None,
                 skip_import=False, skip_rebase=False, skip_advanced=False,
                 skip_aggressive_merging=False, rounding_precision=None,
                 compatibility=None, debug=False, **kwargs):
        super().__init__(node_binary=node_binary, **kwargs)
        self.binary = binary or settings.CLEANCSS_BINARY
        self.keep_line_breaks = keep_line_breaks
        self.remove_special_comments = remove_special_comments
        self.only_keep_first_special_comment = only_keep_first_special_comment
        self.root_path = root_path
        self.skip_import = skip_import
        self.skip_rebase = skip_rebase
        self.skip_advanced = skip_advanced
        self.skip_aggressive_merging = skip_aggressive_merging
        self.rounding_precision = rounding_precision
        self.compatibility = compatibility
        self.debug = debug

    def get_command(self, infile):
        command = self.get_command_prefix(self.binary)
        for attribute, flag, takes_value in self.flags:
            value = getattr(self, attribute)
            if not value:
                continue
            command.append(flag)
            if takes_value:
                command.append(str(value))
        command.append(infile)
        return command
