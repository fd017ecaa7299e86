SPACING = {
    "xs": 4,
    "sm": 8,
    "md": 16,
    "lg": 24,
    "xl": 32,
}

RADII = {
    "sm": 8,
    "md": 12,
    "lg": 16,
}

FONTS = {
    "base": '"Space Grotesk", "Segoe UI", sans-serif',
    "mono": '"IBM Plex Mono", "Consolas", monospace',
}

COLORS = {
    "bg": "#0b1626",
    "surface": "#12213a",
    "surface2": "#172a47",
    "border": "#23395c",
    "muted": "#8aa4c8",
    "text": "#f4f7ff",
    "text2": "#9aa4b5",
    "accent": "#6ab6ff",
    "warm": "#f2a85b",
    "cold": "#7be7d9",
    "bad": "#ff7b7b",
}


def css_variables() -> str:
    lines = [f"--color-{key}: {value};" for key, value in COLORS.items()]
    lines += [f"--space-{key}: {value}px;" for key, value in SPACING.items()]
    lines += [f"--radius-{key}: {value}px;" for key, value in RADII.items()]
    lines += [f"--font-{key}: {value};" for key, value in FONTS.items()]
    return ":root {\n  " + "\n  ".join(lines) + "\n}"
