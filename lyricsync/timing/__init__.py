from .parser import parse_srt
from .resolver import TimeDomain, active_index, active_index_by_frame, resolve_active_index
from .correlator import (
    CorrelationStrategy,
    active_translation,
    find_translation,
    should_show_subtitle,
)
from .language import contains_hangul, is_target_language_text
from .windowing import visible_window
