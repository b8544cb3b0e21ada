from setuptools import setup

requirements = [
    "PyQt5",
]

test_requirements = [
    "pytest",
    "pytest-qt",
]

setup(
    name="donation_box",
    version="0.0.1",
    description="Time-limited donation box with token and NFT ledgers, and a totaliser to watch it",
    author="Tachibana Kanade",
    author_email="h0m54r@mastodon.social",
    packages=[
        "donation_box",
        "donation_box.widgets",
        "donation_box.tests",
    ],
    entry_points={
        "console_scripts": ["DonationBox=donation_box.totaliser:main"]
    },
    install_requires=requirements,
    extras_require={"test": test_requirements},
    zip_safe=False,
    keywords="donation_box",
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
)
