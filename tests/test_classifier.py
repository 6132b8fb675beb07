"""Tests for classifier module."""

from devports.classifier import DEFAULT_ICON, Classification, classify, framework_label, icon_for


def test_classify_next():
    """Test Next.js detection."""
    result = classify("next-server")
    assert result.label == "Next.js"
    assert result.icon == "▲"


def test_classify_fallback_to_process_name():
    """Test unknown processes keep their name verbatim."""
    result = classify("random-binary")
    assert result == Classification(label="random-binary", icon=DEFAULT_ICON)


def test_classify_is_idempotent():
    """Test classify is a pure function."""
    assert classify("node") == classify("node")
    assert classify("Xcode") == classify("Xcode")


def test_classify_case_insensitive():
    """Test matching ignores case."""
    assert framework_label("Python") == "Python"
    assert framework_label("VITE") == "Vite"
    assert framework_label("NODE") == "Node.js"


def test_framework_before_runtime():
    """Test framework tokens win over runtime tokens they contain."""
    assert framework_label("node-vite") == "Vite"
    assert framework_label("turbo-node") == "Turbopack"
    assert framework_label("nuxt") == "Nuxt"


def test_runtime_aliases():
    """Test alternative process names for each runtime."""
    assert framework_label("uvicorn") == "Python"
    assert framework_label("gunicorn") == "Python"
    assert framework_label("python3.12") == "Python"
    assert framework_label("rails") == "Ruby"
    assert framework_label("artisan") == "PHP"
    assert framework_label("java") == "Java"
    assert framework_label("rustc") == "Rust"
    assert framework_label("flask") == "Flask"
    assert framework_label("django-admin") == "Django"


def test_control_center():
    """Test the macOS Control Center special case."""
    assert framework_label("ControlCe") == "ControlCenter"
    assert classify("ControlCe").icon == "⚙️"


def test_icons():
    """Test the icon table and its default."""
    assert classify("node").icon == "🟢"
    assert classify("uvicorn").icon == "🐍"
    assert classify("ruby").icon == "💎"
    assert icon_for("FASTAPI") == "🐍"
    assert icon_for("Remix") == DEFAULT_ICON
    assert icon_for("postgres") == DEFAULT_ICON
