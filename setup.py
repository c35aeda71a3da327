from setuptools import find_packages, setup

setup(
    name="rawhttp",
    version="0.1.0",
    description="A minimal HTTP/1.1 request/response engine on raw asyncio streams",
    author="Blaž Škufca",
    author_email="3877198+blazskufca@users.noreply.github.com",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.12",
    entry_points={
        "console_scripts": [
            "rawhttp=rawhttp.__main__:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
)
