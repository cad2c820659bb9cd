"""
Filter construction from configuration properties

Filters are declared as numbered entries, evaluated in numeric order:

    filters.1 = LogLevelRangeFilter
    filters.1.LogLevelMin = WARN
    filters.1.AcceptOnMatch = false
    filters.2 = StringMatchFilter
    filters.2.StringToMatch = heartbeat
    filters.2.AcceptOnMatch = false
    filters.3 = DenyAllFilter
"""

from typing import Dict, Type
import logging

from log_filter_module.core.properties import Properties
from log_filter_module.filters.base_filter import BaseFilter, FilterChain
from log_filter_module.filters.context_filter import MDCMatchFilter, NDCMatchFilter
from log_filter_module.filters.deny_all_filter import DenyAllFilter
from log_filter_module.filters.level_filter import LogLevelMatchFilter, LogLevelRangeFilter
from log_filter_module.filters.string_match_filter import StringMatchFilter

logger = logging.getLogger(__name__)

# Namespace accepted in front of the standard filter names
QUALIFIED_PREFIX = "log4cplus::spi::"

_registry: Dict[str, Type[BaseFilter]] = {}


def register_filter(name: str, filter_class: Type[BaseFilter]) -> None:
    """
    Make a filter type available to configuration.

    Args:
        name: Type name used in properties
        filter_class: BaseFilter subclass implementing from_properties

    Raises:
        TypeError: If filter_class is not a BaseFilter subclass or does not
                   implement from_properties
    """
    if not (isinstance(filter_class, type) and issubclass(filter_class, BaseFilter)):
        raise TypeError("filter_class must be a BaseFilter subclass")
    if filter_class.from_properties.__func__ is BaseFilter.from_properties.__func__:
        raise TypeError(f"{filter_class.__name__} cannot be built from properties")
    _registry[name] = filter_class


def get_filter_class(type_name: str) -> Type[BaseFilter]:
    """
    Resolve a configured type name.

    Raises:
        ValueError: If no filter is registered under that name
    """
    name = type_name.strip()
    if name.startswith(QUALIFIED_PREFIX):
        name = name[len(QUALIFIED_PREFIX):]
    try:
        return _registry[name]
    except KeyError:
        raise ValueError(f"Unknown filter type: {type_name!r}") from None


def create_filter(type_name: str, properties: Properties) -> BaseFilter:
    """
    Build one filter.

    Args:
        type_name: Registered type name, optionally namespace-qualified
        properties: Options of this filter (prefix already stripped)

    Returns:
        New filter instance

    Raises:
        ValueError: If type_name is unknown
    """
    return get_filter_class(type_name).from_properties(properties)


def build_filter_chain(properties: Properties, prefix: str = "filters.") -> FilterChain:
    """
    Build a chain from numbered filter entries.

    Entries with an unknown type are logged and skipped.

    Args:
        properties: Configuration holding the entries
        prefix: Key prefix in front of the entry numbers

    Returns:
        FilterChain, empty when no entries are present
    """
    entries = properties.get_property_subset(prefix)
    numbers = sorted((key for key in entries if key.isdecimal()), key=int)

    chain = FilterChain()
    for number in numbers:
        type_name = entries.get_property(number)
        try:
            filter_class = get_filter_class(type_name)
        except ValueError:
            logger.error("Skipping %s%s: unknown filter type %r", prefix, number, type_name)
            continue
        options = entries.get_property_subset(f"{number}.")
        chain.append_filter(filter_class.from_properties(options))
    return chain


for _filter_class in (
    DenyAllFilter,
    LogLevelMatchFilter,
    LogLevelRangeFilter,
    StringMatchFilter,
    NDCMatchFilter,
    MDCMatchFilter,
):
    register_filter(_filter_class.__name__, _filter_class)
