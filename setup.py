from setuptools import setup

setup(name="mimetree",
      description="Parse MIME documents into a tree of decoded parts",
      version="0.1.0",
      author="mimetree contributors",
      classifiers = [
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Development Status :: 3 - Alpha",
          "Intended Audience :: Developers",
          "License :: OSI Approved :: ISC License (ISCL)",
          "Operating System :: OS Independent",
          "Topic :: Communications :: Email",
          "Topic :: Software Development :: Libraries :: Python Modules",
      ],
      python_requires=">=3.7",
      install_requires=[ "bottle" ],
      extras_require={ "test": [ "pytest" ] },
      packages=[ "mimetree", "mimetree.tests" ])
