from setuptools import setup

setup(
    name='FabWeight',
    version='0.1.0',
    description='A Python package for dry weight takeoff of fabrication parts and assemblies',
    packages=['FabWeight'],
    include_package_data=True,
    package_data={
        'FabWeight': ['weight_tables.yaml', 'logging.ini', 'pint definitions.txt'],
    },
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering',
    ],
    install_requires=[
        'Pint',
        'Serialize',
        'pyyaml',
        'xlsxwriter',
    ],
)
