import copy

from django.utils.encoding import force_bytes

from cleancss_filter.filters import FilterBase
from cleancss_filter.utils import get_class


class StringAsset(object):
    """
    An asset held in memory.

    ``filters`` may contain filter instances, filter classes or dotted
    paths to filter classes; classes are instantiated without arguments.
    """
    def __init__(self, content, filters=None):
        self.content = force_bytes(content)
        self.filters = []
        for f in filters or ():
            self.ensure_filter(f)

    def ensure_filter(self, f):
        if not isinstance(f, FilterBase):
            f = get_class(f)()
        if f not in self.filters:
            self.filters.append(f)
        return f

    def get_content(self):
        return self.content

    def set_content(self, content):
        self.content = force_bytes(content)

    def _filters_with(self, additional_filter):
        filters = list(self.filters)
        if additional_filter is not None:
            filters.append(additional_filter)
        return filters

    def load(self, additional_filter=None):
        for f in self._filters_with(additional_filter):
            f.load(self)

    def dump(self, additional_filter=None):
        # Filters run against a copy so dumping twice gives the same result
        asset = copy.copy(self)
        for f in self._filters_with(additional_filter):
            f.dump(asset)
        return asset.content
