# flake8: noqa
from cleancss_filter.filters.base import FilterBase, ProcessFilter, NodeFilter
from cleancss_filter.exceptions import FilterError
