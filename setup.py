"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='yertle-logo',
	author='Yertle Contributors',
	version='0.1.0',
	packages=['yertle', 'yertle.adapters', ],
	entry_points={
		'console_scripts': ["yertle = yertle.cmdline:main"],
	},
	license='MIT',
	description='A Logo interpreter driving a turtle-graphics state machine',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Education",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
		"pygame>=2.4.0",
	]
)
