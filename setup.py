from setuptools import setup, find_packages

setup(
    name="tictactoe_negamax",
    version="0.1",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "tictactoe-negamax=tictactoe_negamax.ui.play:main",
        ],
    },
)
