"""Guess which framework a listening process belongs to."""

from dataclasses import dataclass

DEFAULT_ICON = "🔵"

# First match wins: framework tokens before the runtimes that may contain them
FRAMEWORK_RULES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("next",), "Next.js"),
    (("vite",), "Vite"),
    (("astro",), "Astro"),
    (("remix",), "Remix"),
    (("nuxt",), "Nuxt"),
    (("svelte",), "SvelteKit"),
    (("webpack",), "Webpack"),
    (("parcel",), "Parcel"),
    (("esbuild",), "esbuild"),
    (("turbo",), "Turbopack"),
    (("node",), "Node.js"),
    (("python", "uvicorn", "gunicorn"), "Python"),
    (("flask",), "Flask"),
    (("django",), "Django"),
    (("fastapi",), "FastAPI"),
    (("ruby", "rails"), "Ruby"),
    (("php", "artisan"), "PHP"),
    (("go",), "Go"),
    (("rust", "cargo"), "Rust"),
    (("java", "spring"), "Java"),
    (("controlce",), "ControlCenter"),
)

ICONS: dict[str, str] = {
    "next.js": "▲",
    "vite": "⚡",
    "node.js": "🟢",  # plain `node` listeners get this, not DEFAULT_ICON
    "python": "🐍",
    "flask": "🐍",
    "django": "🐍",
    "fastapi": "🐍",
    "ruby": "💎",
    "go": "🐹",
    "rust": "🦀",
    "java": "☕",
    "php": "🐘",
    "astro": "🚀",
    "controlcenter": "⚙️",
}


@dataclass(frozen=True)
class Classification:
    """Display label and icon for a process."""

    label: str
    icon: str


def framework_label(process_name: str) -> str:
    """Map a process name to a framework label.

    Args:
        process_name: Command name as reported by lsof

    Returns:
        Framework label, or the process name itself if no rule matches
    """
    lower = process_name.lower()
    for keywords, label in FRAMEWORK_RULES:
        for keyword in keywords:
            if keyword in lower:
                return label
    return process_name


def icon_for(label: str) -> str:
    """Icon for a label, case-insensitive."""
    return ICONS.get(label.lower(), DEFAULT_ICON)


def classify(process_name: str) -> Classification:
    """Classify a process by name."""
    label = framework_label(process_name)
    return Classification(label=label, icon=icon_for(label))
