from setuptools import setup

setup(
    name="ydictionary",
    version="0.1",
    packages=["ydictionary"],
    url="https://yandex.com/dev/dictionary",
    license="",
    description="Command-line client for Yandex Dictionary",
    entry_points={
        "console_scripts": ["ydictionary=ydictionary.__main__:main"],
    },
    python_requires=">=3.12",
    install_requires=[
        "coloredlogs",
        "pydantic>=2.0",
        "pymorphy3",
        "pymorphy3-dicts-ru",
        "rich",
        "urllib3>=2.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
