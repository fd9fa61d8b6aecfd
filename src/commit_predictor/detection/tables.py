"""
Static lookup tables used by the classifiers.

The tables are declared in plain dictionaries for readability and then
frozen into read-only mappings when the module is imported. Declaration
order is significant: classifiers walk the tables front to back and the
first match wins, and tie-breaks between equal vote counts also fall
back to declaration order.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Dict, Mapping, Pattern, Tuple


# ---------------------------------------------------------------------------
# Languages
# ---------------------------------------------------------------------------
_LANGUAGES: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "javascript": {
        "extensions": (".js", ".jsx", ".mjs", ".cjs"),
        "test_markers": (".test.", ".spec.", "test/", "__tests__/"),
    },
    "typescript": {
        "extensions": (".ts", ".tsx", ".d.ts", ".mts", ".cts"),
        "test_markers": (".test.", ".spec.", "test/", "__tests__/"),
    },
    "php": {
        "extensions": (".php", ".php4", ".php5", ".php7", ".phtml"),
        "test_markers": ("Test.php", "test/", "tests/", "TestCase.php"),
    },
    "python": {
        "extensions": (".py", ".pyw", ".pyx", ".pyc", ".pyo", ".pyd"),
        "test_markers": ("_test.py", "test_", ".spec.py", "tests/"),
    },
    "java": {
        "extensions": (".java", ".class", ".jar"),
        "test_markers": ("Test.java", "test/", "tests/", "IT.java", "TestCase.java"),
    },
    "go": {
        "extensions": (".go", ".mod", ".sum"),
        "test_markers": ("_test.go", "_suite_test.go", "test/"),
    },
    "ruby": {
        "extensions": (".rb", ".rbw", ".rake", ".gemspec"),
        "test_markers": ("_spec.rb", "_test.rb", "spec/", "test/"),
    },
    "csharp": {
        "extensions": (".cs", ".csx"),
        "test_markers": ("Test.cs", "Tests/", "test/", "Spec.cs"),
    },
    "cpp": {
        "extensions": (".cpp", ".cc", ".cxx", ".c++", ".h", ".hpp", ".hh", ".hxx"),
        "test_markers": ("_test.", "_spec.", "test/", "tests/"),
    },
    "c": {
        "extensions": (".c", ".h"),
        "test_markers": ("_test.", "_spec.", "test/", "tests/"),
    },
    "rust": {
        "extensions": (".rs", ".rlib"),
        "test_markers": ("_test.rs", "_spec.rs", "tests/"),
    },
    "swift": {
        "extensions": (".swift",),
        "test_markers": ("Test.swift", "Tests/", "test/"),
    },
    "kotlin": {
        "extensions": (".kt", ".kts"),
        "test_markers": ("Test.kt", "test/", "tests/"),
    },
    "scala": {
        "extensions": (".scala", ".sc"),
        "test_markers": ("Test.scala", "Spec.scala", "test/", "tests/"),
    },
    "perl": {
        "extensions": (".pl", ".pm", ".t"),
        "test_markers": ("_test.pl", "test/"),
    },
    "r": {
        "extensions": (".r", ".R", ".Rmd"),
        "test_markers": ("_test.R", "test_", "tests/"),
    },
    "haskell": {
        "extensions": (".hs", ".lhs"),
        "test_markers": ("Test.hs", "Spec.hs", "test/"),
    },
    "elixir": {
        "extensions": (".ex", ".exs"),
        "test_markers": ("_test.exs", "test/"),
    },
    "clojure": {
        "extensions": (".clj", ".cljs", ".cljc"),
        "test_markers": ("_test.clj", "test/"),
    },
    "erlang": {
        "extensions": (".erl", ".hrl"),
        "test_markers": ("_test.erl", "_SUITE.erl", "test/"),
    },
    "dart": {
        "extensions": (".dart",),
        "test_markers": ("_test.dart", "test/"),
    },
    "lua": {
        "extensions": (".lua",),
        "test_markers": ("_test.lua", "spec/", "test/"),
    },
    "shell": {
        "extensions": (".sh", ".bash", ".zsh", ".fish"),
        "test_markers": (".test.", "_test.", "test/"),
    },
    "html": {
        "extensions": (".html", ".htm", ".xhtml"),
        "test_markers": (".test.", "_test.", "test/"),
    },
    "css": {
        "extensions": (".css", ".scss", ".sass", ".less", ".styl"),
        "test_markers": (".test.", "_test.", "test/"),
    },
    "sql": {
        "extensions": (".sql", ".psql"),
        "test_markers": ("_test.sql", "test/"),
    },
    "yaml": {
        "extensions": (".yaml", ".yml"),
        "test_markers": (".test.", "_test."),
    },
    "json": {
        "extensions": (".json",),
        "test_markers": (".test.", "_test."),
    },
    "xml": {
        "extensions": (".xml", ".xsd", ".xsl"),
        "test_markers": (".test.", "_test."),
    },
    "markdown": {
        "extensions": (".md", ".markdown"),
        "test_markers": (),
    },
    "docker": {
        "extensions": ("Dockerfile", ".dockerignore"),
        "test_markers": (),
    },
    "makefile": {
        "extensions": ("Makefile", ".mk"),
        "test_markers": (),
    },
    "config": {
        "extensions": (".env", ".ini", ".cfg", ".conf", ".properties"),
        "test_markers": (),
    },
}

# Perl test scripts are recognised by suffix only; ".t" as a substring
# would also match every ".ts" and ".txt" path.
TEST_SUFFIXES: Tuple[str, ...] = (".t",)

CONFIG_MARKERS: Tuple[str, ...] = (
    "package.json", "composer.json", "requirements.txt", "pom.xml",
    "build.gradle", "go.mod", "gemfile", "web.config", "dockerfile",
    ".env", "config/", "settings.", "configuration.",
)

DOC_MARKERS: Tuple[str, ...] = (
    ".md", ".txt", ".rst", ".html", "readme", "docs/", "documentation/",
)

STYLE_MARKERS: Tuple[str, ...] = (".css", ".scss", ".less", ".styl")


# ---------------------------------------------------------------------------
# Frameworks
# ---------------------------------------------------------------------------
_FRAMEWORKS: Dict[str, Dict[str, str]] = {
    "laravel": {
        "controllers": r"app/Http/Controllers/(.+)\.php",
        "models": r"app/Models/(.+)\.php",
        "migrations": r"database/migrations/(.+)\.php",
        "seeds": r"database/seeders/(.+)\.php",
        "factories": r"database/factories/(.+)\.php",
        "requests": r"app/Http/Requests/(.+)\.php",
        "services": r"app/Services/(.+)\.php",
        "repositories": r"app/Repositories/(.+)\.php",
        "events": r"app/Events/(.+)\.php",
        "listeners": r"app/Listeners/(.+)\.php",
        "jobs": r"app/Jobs/(.+)\.php",
        "mail": r"app/Mail/(.+)\.php",
        "notifications": r"app/Notifications/(.+)\.php",
        "policies": r"app/Policies/(.+)\.php",
        "resources": r"app/Http/Resources/(.+)\.php",
        "rules": r"app/Rules/(.+)\.php",
        "middleware": r"app/Http/Middleware/(.+)\.php",
        "views": r"resources/views/(.+)\.blade\.php",
        "routes": r"routes/(.+)\.php",
        "config": r"config/(.+)\.php",
        "tests": r"tests/(.+)\.php",
    },
    "symfony": {
        "controllers": r"src/Controller/(.+)\.php",
        "entities": r"src/Entity/(.+)\.php",
        "repositories": r"src/Repository/(.+)\.php",
        "services": r"src/Service/(.+)\.php",
        "forms": r"src/Form/(.+)\.php",
        "events": r"src/Event/(.+)\.php",
        "listeners": r"src/EventListener/(.+)\.php",
        "commands": r"src/Command/(.+)\.php",
        "migrations": r"migrations/(.+)\.php",
        "templates": r"templates/(.+)\.twig",
        "config": r"config/(.+)\.yaml",
    },
    "react": {
        "components": r"src/components/(.+)\.(jsx|js|tsx|ts)",
        "hooks": r"src/hooks/(.+)\.(js|ts)",
        "pages": r"src/pages/(.+)\.(jsx|js|tsx|ts)",
        "store": r"src/store/(.+)\.(js|ts)",
        "services": r"src/services/(.+)\.(js|ts)",
        "utils": r"src/utils/(.+)\.(js|ts)",
        "contexts": r"src/contexts/(.+)\.(js|ts)",
        "constants": r"src/constants/(.+)\.(js|ts)",
        "types": r"src/types/(.+)\.(js|ts)",
        "styles": r"src/styles/(.+)\.(css|scss|sass|less)",
        "tests": r"src/.*\.(test|spec)\.(js|jsx|ts|tsx)",
    },
    "vue": {
        "components": r"src/components/(.+)\.vue",
        "views": r"src/views/(.+)\.vue",
        "store": r"src/store/(.+)\.(js|ts)",
        "composables": r"src/composables/(.+)\.(js|ts)",
        "utils": r"src/utils/(.+)\.(js|ts)",
        "plugins": r"src/plugins/(.+)\.(js|ts)",
        "directives": r"src/directives/(.+)\.(js|ts)",
        "assets": r"src/assets/(.+)\.(css|scss|sass|less)",
        "tests": r"src/.*\.(test|spec)\.(js|ts)",
    },
    "angular": {
        "components": r"src/app/components/(.+)\.(ts|html|scss)",
        "services": r"src/app/services/(.+)\.ts",
        "guards": r"src/app/guards/(.+)\.ts",
        "interceptors": r"src/app/interceptors/(.+)\.ts",
        "pipes": r"src/app/pipes/(.+)\.ts",
        "directives": r"src/app/directives/(.+)\.ts",
        "modules": r"src/app/modules/(.+)\.ts",
        "models": r"src/app/models/(.+)\.ts",
        "utils": r"src/app/utils/(.+)\.ts",
        "tests": r"src/.*\.spec\.ts",
    },
    "nextjs": {
        "pages": r"pages/(.+)\.(jsx|js|tsx|ts)",
        "components": r"components/(.+)\.(jsx|js|tsx|ts)",
        "api": r"pages/api/(.+)\.(js|ts)",
        "styles": r"styles/(.+)\.(css|scss|sass|less)",
        "utils": r"utils/(.+)\.(js|ts)",
        "hooks": r"hooks/(.+)\.(js|ts)",
        "store": r"store/(.+)\.(js|ts)",
    },
    "nuxt": {
        "pages": r"pages/(.+)\.vue",
        "components": r"components/(.+)\.vue",
        "composables": r"composables/(.+)\.(js|ts)",
        "plugins": r"plugins/(.+)\.(js|ts)",
        "middleware": r"middleware/(.+)\.(js|ts)",
        "store": r"store/(.+)\.(js|ts)",
        "utils": r"utils/(.+)\.(js|ts)",
        "api": r"api/(.+)\.(js|ts)",
    },
    "svelte": {
        "components": r"src/lib/components/(.+)\.svelte",
        "routes": r"src/routes/(.+)\.svelte",
        "stores": r"src/stores/(.+)\.(js|ts)",
        "utils": r"src/utils/(.+)\.(js|ts)",
        "actions": r"src/actions/(.+)\.(js|ts)",
        "tests": r"src/.*\.(test|spec)\.(js|ts)",
    },
    "solidjs": {
        "components": r"src/components/(.+)\.(jsx|js|tsx|ts)",
        "pages": r"src/pages/(.+)\.(jsx|js|tsx|ts)",
        "stores": r"src/stores/(.+)\.(js|ts)",
        "utils": r"src/utils/(.+)\.(js|ts)",
        "api": r"src/api/(.+)\.(js|ts)",
    },
    "express": {
        "routes": r"routes/(.+)\.(js|ts)",
        "controllers": r"controllers/(.+)\.(js|ts)",
        "middleware": r"middleware/(.+)\.(js|ts)",
        "models": r"models/(.+)\.(js|ts)",
        "services": r"services/(.+)\.(js|ts)",
        "utils": r"utils/(.+)\.(js|ts)",
        "config": r"config/(.+)\.(js|ts)",
        "tests": r".*\.(test|spec)\.(js|ts)",
    },
    "nestjs": {
        "controllers": r"src/(.+)\.controller\.(ts|js)",
        "services": r"src/(.+)\.service\.(ts|js)",
        "modules": r"src/(.+)\.module\.(ts|js)",
        "entities": r"src/(.+)\.entity\.(ts|js)",
        "dtos": r"src/(.+)\.dto\.(ts|js)",
        "guards": r"src/(.+)\.guard\.(ts|js)",
        "interceptors": r"src/(.+)\.interceptor\.(ts|js)",
        "middleware": r"src/(.+)\.middleware\.(ts|js)",
        "tests": r".*\.spec\.(ts|js)",
    },
    "fastify": {
        "routes": r"routes/(.+)\.(js|ts)",
        "plugins": r"plugins/(.+)\.(js|ts)",
        "services": r"services/(.+)\.(js|ts)",
        "utils": r"utils/(.+)\.(js|ts)",
        "schemas": r"schemas/(.+)\.(js|ts)",
    },
    "django": {
        "views": r"(\w+)/views\.py",
        "viewsets": r"(\w+)/viewsets\.py",
        "models": r"(\w+)/models\.py",
        "serializers": r"(\w+)/serializers\.py",
        "urls": r"(\w+)/urls\.py",
        "admin": r"(\w+)/admin\.py",
        "forms": r"(\w+)/forms\.py",
        "services": r"(\w+)/services\.py",
        "signals": r"(\w+)/signals\.py",
        "tasks": r"(\w+)/tasks\.py",
        "middleware": r"(\w+)/middleware\.py",
        "templates": r"templates/(.+)\.html",
        "migrations": r"migrations/(.+)\.py",
        "tests": r"(\w+)/tests\.py",
    },
    "flask": {
        "routes": r"(\w+)/routes\.py",
        "models": r"(\w+)/models\.py",
        "services": r"(\w+)/services\.py",
        "utils": r"(\w+)/utils\.py",
        "config": r"config\.py",
        "templates": r"templates/(.+)\.html",
        "tests": r"(\w+)/tests\.py",
    },
    "fastapi": {
        "routers": r"routers/(.+)\.py",
        "models": r"models/(.+)\.py",
        "schemas": r"schemas/(.+)\.py",
        "services": r"services/(.+)\.py",
        "dependencies": r"dependencies/(.+)\.py",
        "utils": r"utils/(.+)\.py",
        "tests": r"tests/(.+)\.py",
    },
    "spring": {
        "controllers": r"controller/(.+)\.java",
        "services": r"service/(.+)\.java",
        "repositories": r"repository/(.+)\.java",
        "entities": r"entity/(.+)\.java",
        "dtos": r"dto/(.+)\.java",
        "config": r"config/(.+)\.java",
        "security": r"security/(.+)\.java",
        "exceptions": r"exception/(.+)\.java",
        "utils": r"util/(.+)\.java",
        "tests": r"test/(.+)\.java",
    },
    "javafx": {
        "controllers": r"controller/(.+)\.java",
        "models": r"model/(.+)\.java",
        "views": r"view/(.+)\.fxml",
        "utils": r"util/(.+)\.java",
    },
    "flutter": {
        "widgets": r"lib/widgets/(.+)\.dart",
        "pages": r"lib/pages/(.+)\.dart",
        "services": r"lib/services/(.+)\.dart",
        "models": r"lib/models/(.+)\.dart",
        "providers": r"lib/providers/(.+)\.dart",
        "utils": r"lib/utils/(.+)\.dart",
        "tests": r"test/(.+)\.dart",
    },
    "reactnative": {
        "components": r"src/components/(.+)\.(jsx|js|tsx|ts)",
        "screens": r"src/screens/(.+)\.(jsx|js|tsx|ts)",
        "navigation": r"src/navigation/(.+)\.(js|ts)",
        "services": r"src/services/(.+)\.(js|ts)",
        "utils": r"src/utils/(.+)\.(js|ts)",
        "store": r"src/store/(.+)\.(js|ts)",
        "tests": r"src/.*\.(test|spec)\.(js|ts)",
    },
    "unity": {
        "scripts": r"Assets/Scripts/(.+)\.cs",
        "scenes": r"Assets/Scenes/(.+)\.unity",
        "prefabs": r"Assets/Prefabs/(.+)\.prefab",
        "materials": r"Assets/Materials/(.+)\.mat",
        "shaders": r"Assets/Shaders/(.+)\.shader",
    },
    "godot": {
        "scripts": r"src/(.+)\.gd",
        "scenes": r"scenes/(.+)\.tscn",
        "resources": r"resources/(.+)\.tres",
    },
    "rails": {
        "controllers": r"app/controllers/(.+)\.rb",
        "models": r"app/models/(.+)\.rb",
        "views": r"app/views/(.+)\.erb",
        "services": r"app/services/(.+)\.rb",
        "jobs": r"app/jobs/(.+)\.rb",
        "mailers": r"app/mailers/(.+)\.rb",
        "helpers": r"app/helpers/(.+)\.rb",
        "tests": r"test/(.+)\.rb",
        "specs": r"spec/(.+)\.rb",
    },
    "gin": {
        "handlers": r"handlers/(.+)\.go",
        "services": r"services/(.+)\.go",
        "models": r"models/(.+)\.go",
        "middleware": r"middleware/(.+)\.go",
        "utils": r"utils/(.+)\.go",
    },
    "echo": {
        "handlers": r"handlers/(.+)\.go",
        "services": r"services/(.+)\.go",
        "models": r"models/(.+)\.go",
        "middleware": r"middleware/(.+)\.go",
    },
    "aspnet": {
        "controllers": r"Controllers/(.+)\.cs",
        "models": r"Models/(.+)\.cs",
        "services": r"Services/(.+)\.cs",
        "views": r"Views/(.+)\.cshtml",
        "viewmodels": r"ViewModels/(.+)\.cs",
        "repositories": r"Repositories/(.+)\.cs",
        "middleware": r"Middleware/(.+)\.cs",
    },
}

# Manifest files checked (in order) for each framework, and the markers
# that confirm the framework when found in the manifest text.
_MANIFESTS: Dict[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = {
    "laravel": (("artisan", "composer.json"), ('"laravel/framework"', "'laravel/framework'")),
    "react": (("package.json",), ('"react"', "'react'")),
    "vue": (("package.json", "vue.config.js"), ('"vue"', "'vue'", '"nuxt"', "'nuxt'")),
    "django": (("manage.py", "requirements.txt"), ("Django", "django")),
    "spring": (("pom.xml", "build.gradle"), ("spring-boot", "springframework")),
    "express": (("package.json", "app.js"), ('"express"', "'express'")),
    "flask": (("app.py", "requirements.txt"), ("Flask", "flask")),
}


# ---------------------------------------------------------------------------
# Frozen, process-wide views
# ---------------------------------------------------------------------------
class FrameworkConfig:
    """Read-only description of one framework's path layout."""

    __slots__ = ("name", "patterns", "scopes")

    def __init__(self, name: str, patterns: Mapping[str, Pattern[str]], scopes: Tuple[str, ...]) -> None:
        self.name = name
        self.patterns = patterns
        self.scopes = scopes

    def __repr__(self) -> str:
        return f"FrameworkConfig({self.name!r}, scopes={self.scopes!r})"


LANGUAGE_EXTENSIONS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {name: spec["extensions"] for name, spec in _LANGUAGES.items()}
)

TEST_MARKERS: Tuple[str, ...] = tuple(
    dict.fromkeys(marker for spec in _LANGUAGES.values() for marker in spec["test_markers"])
)

FRAMEWORKS: Mapping[str, FrameworkConfig] = MappingProxyType(
    {
        name: FrameworkConfig(
            name,
            MappingProxyType({category: re.compile(regex) for category, regex in patterns.items()}),
            tuple(patterns),
        )
        for name, patterns in _FRAMEWORKS.items()
    }
)

FRAMEWORK_MANIFESTS: Mapping[str, Tuple[Tuple[str, ...], Tuple[str, ...]]] = MappingProxyType(dict(_MANIFESTS))
