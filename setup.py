# pylint: disable=missing-module-docstring
# ruff: noqa

from pathlib import Path

from setuptools import find_packages, setup


def read_long_description() -> str:
    """Return README contents for PyPI description."""
    readme_path = Path(__file__).with_name("README.md")
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else "WeChat hot-list pusher"


setup(
    name="wxhot-pusher",
    version="0.1.0",
    description="Push the WeChat hot-topic list to WxPusher once per run",
    long_description=read_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.11",
    packages=find_packages(include=["hotlist_engine", "hotlist_engine.*", "fetchers", "notifiers", "content_engine"]),
    include_package_data=True,
    install_requires=[
        "httpx>=0.26",
        "pydantic>=2.5",
        "python-dotenv>=1.0",
        "tzdata",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "respx>=0.20",
        ],
    },
    entry_points={
        "console_scripts": [
            "wxhot-push = hotlist_engine.cli_entrypoints:push",
            "wxhot-push-test = hotlist_engine.cli_entrypoints:push_test",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
