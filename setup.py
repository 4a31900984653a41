from setuptools import setup, find_packages
import os
from glob import glob

package_name = 'wheelchair_mppi_critics'

setup(
    name=package_name,
    version='0.1.0',
    packages=find_packages(exclude=['test']),
    data_files=[
        ('share/ament_index/resource_index/packages',
            ['resource/' + package_name]),
        ('share/' + package_name, ['package.xml']),
        # Config files
        (os.path.join('share', package_name, 'config'),
            glob('config/*.yaml')),
    ],
    install_requires=[
        'setuptools',
        'torch>=2.0.0',
        'numpy>=1.24.0',
        'pyyaml>=6.0',
        'loguru>=0.7.0',
    ],
    zip_safe=True,
    maintainer='Siddharth Tiwari',
    maintainer_email='s24035@students.iitmandi.ac.in',
    description='Costmap obstacle critic for the wheelchair MPPI controller',
    license='MIT',
    tests_require=['pytest'],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
