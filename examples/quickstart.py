"""Quickstart example for intldatetime.

This example demonstrates rendering timestamps with legacy format strings in
different locales and calendars, and the display helpers a page template
layer uses.

Note: timestamps are milliseconds since the Unix epoch, the way markup
attributes usually carry them.
"""

import logging

from intldatetime import (
    DisplaySettings,
    DisplayType,
    Renderer,
    format_timestamp,
    iso_datetime,
    render,
    render_fallback_only,
    title_text,
)

logging.basicConfig(level=logging.WARNING)

# 2024-01-07 13:05:09 UTC, a Sunday
TIMESTAMP = 1704632709000

# Example 1: Legacy format tokens
print("=" * 50)
print("Example 1: Legacy Format Tokens")
print("=" * 50)

print(render(TIMESTAMP, "F j, Y g:i a"))
# Output: January 7, 2024 1:05 pm

print(render(TIMESTAMP, "D, d M Y H:i:s"))
# Output: Sun, 07 Jan 2024 13:05:09

print(render(TIMESTAMP, "l (w/N)"))
# Output: Sunday (0/7)

# Example 2: Escapes
print("\n" + "=" * 50)
print("Example 2: Escaped Characters")
print("=" * 50)

print(render(TIMESTAMP, "\\Y\\e\\a\\r: Y"))
# Output: Year: 2024

# Example 3: Other locales
print("\n" + "=" * 50)
print("Example 3: Locales")
print("=" * 50)

for locale in ("de-DE", "fr-FR", "th-TH", "ja"):
    print(f"{locale:6} {render(TIMESTAMP, 'l j F Y', locale)}")

# Example 4: Buddhist Era for Thai locales
print("\n" + "=" * 50)
print("Example 4: Buddhist Era Year")
print("=" * 50)

print(render(TIMESTAMP, "j/n/B", "th-TH", "buddhist"))
# Output: 7/1/2567

print(render(TIMESTAMP, "j/n/b", "th-TH", "buddhist"))
# Output: 7/1/67

# Other calendars need the icu extra (pip install intldatetime[icu])
print(render(TIMESTAMP, "F j, Y", "en", "hebrew"))
# Output: Tevet 26, 5784 AM
# Without PyICU each token degrades to Gregorian: January 7, 2024

# Example 5: Gregorian fallback only
print("\n" + "=" * 50)
print("Example 5: Fallback Formatter")
print("=" * 50)

print(render_fallback_only(TIMESTAMP, "F j, Y g:i A"))
# Output: January 7, 2024 1:05 PM

# Example 6: Display helpers
print("\n" + "=" * 50)
print("Example 6: Display Helpers")
print("=" * 50)

settings = DisplaySettings.create("en-US", "gregory")
print(format_timestamp(TIMESTAMP, settings, display_type=DisplayType.DATE))
# Output: January 7, 2024

print(format_timestamp(TIMESTAMP, settings, custom_format="Y-m-d"))
# Output: 2024-01-07

print(iso_datetime(TIMESTAMP))
# Output: 2024-01-07T13:05:09+00:00

print(title_text(TIMESTAMP, settings.locale))

# Example 7: Formatter cache statistics
print("\n" + "=" * 50)
print("Example 7: Formatter Cache")
print("=" * 50)

renderer = Renderer()
for _ in range(3):
    format_timestamp(TIMESTAMP, settings, custom_format="D j M", renderer=renderer)
print(renderer.cache.get_stats())
# Output: {'size': 3, 'hits': 6, 'misses': 3, 'hit_rate': 66.67}
