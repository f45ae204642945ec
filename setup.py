from setuptools import setup, find_packages

setup(
    name="scrollback",
    version="0.1.0",
    description="Scrolling transcript display with a paused scrollback mode",
    packages=find_packages(include=["scrollback", "scrollback.*"]),
    install_requires=[
        "httpx",
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    python_requires=">=3.11",
)
