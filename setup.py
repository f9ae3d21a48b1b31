#!/usr/bin/env python

import re, timeit
from setuptools import setup, Command

with open("src/srp6a/_version.py") as f:
    version = re.search(r'^__version__ = "([^"]+)"', f.read(), re.M).group(1)

with open("README.md") as f:
    long_description = f.read()

cmdclass = {}

class Speed(Command):
    description = "run speed benchmarks"
    user_options = []
    boolean_options = []
    def initialize_options(self):
        pass
    def finalize_options(self):
        pass
    def run(self):
        def do(setup_statements, statement):
            # extracted from timeit.py
            t = timeit.Timer(stmt=statement,
                             setup="\n".join(setup_statements))
            # determine number so that 0.2 <= total time < 2.0
            for i in range(1, 10):
                number = 10**i
                x = t.timeit(number)
                if x >= 0.2:
                    break
            return x / number

        def abbrev(t):
            if t > 1.0:
                return "%.3fs" % t
            if t > 1e-3:
                return "%.1fms" % (t*1e3)
            return "%.1fus" % (t*1e6)

        for group in ["1024", "2048", "3072", "4096", "8192"]:
            S1 = ("from srp6a import (ClientSetup, ClientAuthenticate,"
                  " ServerAuthenticate, Params)")
            S2 = "p = Params(%r)" % group
            S3 = "r = ClientSetup('user', 'password', params=p).init()"
            S4 = "c = ClientAuthenticate('user', 'password', params=p)"
            S5 = "s = ServerAuthenticate(r.I, r.s, r.v, params=p)"
            S6 = "ch = s.init(c.init().A)"
            S7 = "c.exchange(ch.B, ch.s)"
            S8 = "c.verify_server(s.verify_client(c.authenticate().M1).M2)"

            setup_time = do([S1, S2], S3)
            full = do([S1, S2, S3], ";".join([S4, S5, S6, S7, S8]))
            init = do([S1, S2], ";".join([S4, "c.init()"]))
            print("%-5s: setup=%6s, exchange=%6s, client init=%6s"
                  % (group, abbrev(setup_time), abbrev(full), abbrev(init)))
cmdclass["speed"] = Speed

setup(name="srp6a",
      version=version,
      description="SRP-6a password-authenticated key exchange (pure python)",
      long_description=long_description,
      long_description_content_type="text/markdown",
      package_dir={"": "src"},
      packages=["srp6a", "srp6a.test"],
      license="MIT",
      cmdclass=cmdclass,
      python_requires=">=3.6",
      classifiers=[
          "Intended Audience :: Developers",
          "License :: OSI Approved :: MIT License",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Security :: Cryptography",
          ],
      install_requires=["hkdf"],
      )
