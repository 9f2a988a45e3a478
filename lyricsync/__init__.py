from .domain import DisplayState, LyricLine, Timeline, WindowEntry
from .timing import (
    CorrelationStrategy,
    active_index,
    active_index_by_frame,
    active_translation,
    is_target_language_text,
    parse_srt,
    should_show_subtitle,
    visible_window,
)
from .display import build_render_plan, resolve_display_state
