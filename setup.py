import setuptools

setuptools.setup(name="base62-standard",
                 version="1.0.0",
                 description="Base62 encoding for integers and byte sequences",
                 long_description=open("README.md").read(),
                 long_description_content_type="text/markdown",
                 license="Apache-2.0",
                 packages=setuptools.find_packages(".", exclude=("tests", "tests.*")),
                 python_requires=">=3.7",
                 install_requires=open("requirements.txt").read().splitlines(),
                 extras_require={"test": ["pytest", "hypothesis"]},
                 classifiers=[
                     "Development Status :: 5 - Production/Stable",
                     "License :: OSI Approved :: Apache Software License",
                     "Topic :: Software Development :: Libraries"
                 ])
