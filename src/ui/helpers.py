"""UI helpers: safe_addstr, bordered boxes, text alignment, and scroll clamping."""
import curses


def safe_addstr(win, row, col, text, attr=0, max_width=None):
    try:
        if max_width is not None:
            if max_width <= 0:
                return False
            if len(text) > max_width:
                text = text[:max_width]
        win.addstr(row, col, text, attr)
        return True
    except curses.error:
        return False


def align_text(text, width, align="left"):
    """Pad or cut text to exactly width cells. align: left, center or right."""
    if width <= 0:
        return ""
    if len(text) > width:
        return text[:width]
    if align == "center":
        return text.center(width)
    if align == "right":
        return text.rjust(width)
    return text.ljust(width)


def draw_box(win, top, left, height, width, title="", attr=0):
    """Draw a border with an optional title in the top edge. Returns False if it did not fit."""
    if height < 2 or width < 2:
        return False
    horiz = "─" * (width - 2)
    ok = safe_addstr(win, top, left, "┌" + horiz + "┐", attr)
    for r in range(top + 1, top + height - 1):
        ok = safe_addstr(win, r, left, "│", attr) and ok
        ok = safe_addstr(win, r, left + width - 1, "│", attr) and ok
    # The bottom-right cell of the screen raises curses.error after writing; safe_addstr absorbs it
    safe_addstr(win, top + height - 1, left, "└" + horiz + "┘", attr)
    if title and width > 4:
        safe_addstr(win, top, left + 1, f" {title} "[: width - 2], attr | curses.A_BOLD)
    return ok


def clamp_scroll_offset(scroll_offset, selected, visible):
    """Smallest move of scroll_offset that keeps the selected item within the visible window."""
    if visible <= 0:
        return 0
    if selected < scroll_offset:
        return max(0, selected)
    if selected >= scroll_offset + visible:
        return selected - visible + 1
    return max(0, scroll_offset)
