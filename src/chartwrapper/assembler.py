"""Assembly of chart fragments into GET urls and POST forms.

Pipeline:
1. Emit the mandatory chart type (``cht``) and the optional size (``chs``).
2. Group the fragments of every registered feature source by prefix.
3. Drop empty groups and sort the rest by prefix, so identical charts always
   produce identical urls regardless of the order sources contributed in.
"""

from html import escape
from typing import TYPE_CHECKING, Iterable, Mapping

from .constants import (
    AMPERSAND_SEPARATOR,
    CHART_SIZE_PREFIX,
    CHART_TYPE_PREFIX,
    DEFAULT_SEPARATOR,
    GOOGLE_API,
    GOOGLE_POST_API,
    OUTPUT_FORMAT_PREFIX,
)
from .features import FeatureSource, Fragment
from .log import get_logger

if TYPE_CHECKING:
    from .chart import ChartSpec, OutputFormat

logger = get_logger("assembler")

RESERVED_PREFIXES = frozenset({CHART_TYPE_PREFIX, CHART_SIZE_PREFIX})


class FragmentGroup:
    """All fragments sharing one prefix, rendered as a single url parameter."""

    def __init__(self, prefix: str, separator: str = DEFAULT_SEPARATOR):
        if separator is None:
            raise ValueError("separator can not be None")
        self.prefix = prefix
        self.separator = separator
        self._data: list[str] = []

    def add(self, fragment: Fragment) -> None:
        if fragment.prefix != self.prefix:
            raise ValueError(
                f"Fragment prefix '{fragment.prefix}' does not match group '{self.prefix}'"
            )
        self._data.append(fragment.data)

    @property
    def content(self) -> str:
        """Data of all fragments joined by the separator; empty data is skipped."""
        return self.separator.join(data for data in self._data if data)

    def render(self) -> str:
        """
        Render the group for a GET url.

        Returns:
            ``""`` if the group carries no data, the bare content if the prefix
            is empty, ``prefix=content`` otherwise
        """
        content = self.content
        if not content:
            return ""
        if self.prefix == "":
            return content
        return f"{self.prefix}={content}"

    def __bool__(self) -> bool:
        return bool(self.content)

    def __repr__(self) -> str:
        return f"FragmentGroup({self.prefix!r}, {self.content!r})"


class FragmentRegistry:
    """Collects fragments into one :class:`FragmentGroup` per prefix."""

    def __init__(self, family_separators: Mapping[str, str] | None = None):
        """
        Initialize the registry.

        Args:
            family_separators: Separator per prefix for prefixes that do not
                join their fragments with ``|``
        """
        self.family_separators = dict(family_separators or {})
        self._groups: dict[str, FragmentGroup] = {}

    def add(self, fragment: Fragment) -> None:
        """
        Add ``fragment`` to the group of its prefix.

        Raises:
            ValueError: If the prefix is one the chart itself emits (type, size)
        """
        if fragment.prefix in RESERVED_PREFIXES:
            raise ValueError(f"Prefix '{fragment.prefix}' is reserved for the chart itself")
        group = self._groups.get(fragment.prefix)
        if group is None:
            separator = self.family_separators.get(fragment.prefix, DEFAULT_SEPARATOR)
            group = FragmentGroup(fragment.prefix, separator)
            self._groups[fragment.prefix] = group
        group.add(fragment)

    def add_all(self, sources: Iterable[FeatureSource]) -> None:
        for source in sources:
            for fragment in source.fragments():
                self.add(fragment)

    def groups(self) -> list[FragmentGroup]:
        """Return the non-empty groups sorted by prefix."""
        return sorted(
            (group for group in self._groups.values() if group),
            key=lambda group: group.prefix,
        )


def base_groups(chart: "ChartSpec") -> list[FragmentGroup]:
    """Build the chart type group and, if a size is set, the size group."""
    groups = [_single_group(CHART_TYPE_PREFIX, chart.chart_type)]
    size = chart.size.to_url_data()
    if size:
        groups.append(_single_group(CHART_SIZE_PREFIX, size))
    return groups


def collect_groups(chart: "ChartSpec") -> list[FragmentGroup]:
    """Collect every group of ``chart`` in url order."""
    registry = FragmentRegistry(chart.family_separators)
    registry.add_all(chart.sources)
    groups = base_groups(chart) + registry.groups()
    logger.debug(
        "Collected %d parameter groups for chart type '%s'", len(groups), chart.chart_type
    )
    return groups


def build_url(
    chart: "ChartSpec",
    base_url: str = GOOGLE_API,
    output_format: "OutputFormat | None" = None,
) -> str:
    """
    Build the GET url of a chart.

    Args:
        chart: Chart to serialize
        base_url: Service location the parameters are appended to
        output_format: Optional ``chof`` output format, appended last

    Returns:
        ``base_url`` followed by the ``&``-joined parameters
    """
    parameters = [group.render() for group in collect_groups(chart)]
    if output_format is not None:
        parameters.append(f"{OUTPUT_FORMAT_PREFIX}={output_format.value}")
    return base_url + AMPERSAND_SEPARATOR.join(parameter for parameter in parameters if parameter)


def post_parameters(chart: "ChartSpec") -> dict[str, str]:
    """Return the chart parameters as a prefix to content mapping."""
    return {group.prefix: group.content for group in collect_groups(chart)}


def build_post_form(chart: "ChartSpec", post_url: str = GOOGLE_POST_API) -> str:
    """Build an HTML form posting the chart parameters to ``post_url``."""
    lines = [f"<form action='{escape(post_url)}' method='POST' id='chartForm'>"]
    for group in collect_groups(chart):
        lines.append(
            f'<input type="hidden" name="{escape(group.prefix)}" value="{escape(group.content)}" />'
        )
    lines.append('<input type="submit" />')
    lines.append("</form>")
    return "\n".join(lines)


def _single_group(prefix: str, data: str) -> FragmentGroup:
    group = FragmentGroup(prefix)
    group.add(Fragment(prefix, data))
    return group
