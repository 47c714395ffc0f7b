from setuptools import find_packages, setup


def main():
    with open('README.md', encoding='utf-8') as f:
        long_description = f.read()

    setup(
        name='miischeme',
        version='0.1.0',
        description='Interpreter for a small Lisp dialect with localized error messages',
        long_description=long_description,
        long_description_content_type='text/markdown',
        packages=find_packages(exclude=['test']),
        package_data={'miischeme': ['prelude.mii']},
        python_requires='>=3.8',
        install_requires=[
            'click',
            'prompt-toolkit'
        ],
        extras_require={'test': ['pytest']},
        entry_points={'console_scripts': ['miischeme=miischeme.cli:main']},
    )


if __name__ == '__main__':
    main()
