#!/usr/bin/env python

import timeit
from setuptools import setup, Command

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
            for i in range(0, 10):
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

        for params in ["Params1024", "Params1536", "Params2048",
                       "Params3072", "Params4096"]:
            S1 = "from srp6a import SRPClient, SRPServer, %s" % params
            S2 = "c = SRPClient(%s); s = SRPServer(%s)" % (params, params)
            S3 = "salt = c.generate_salt()"
            S4 = "x = c.derive_private_key(salt, 'user', 'password')"
            S5 = "v = c.derive_verifier(x)"
            S6 = "ce = c.generate_ephemeral(); se = s.generate_ephemeral(v)"
            S7 = "cs = c.derive_session(ce.secret, se.public, salt, 'user', x)"
            S8 = ("ss = s.derive_session(se.secret, ce.public, salt, 'user',"
                  " v, cs.proof)")
            S9 = "c.verify_session(ce.public, cs, ss.proof)"

            register = do([S1, S2], ";".join([S3, S4, S5]))
            full = do([S1, S2, S3, S4, S5], ";".join([S6, S7, S8, S9]))
            print("%-10s: register=%6s, login=%6s"
                  % (params, abbrev(register), abbrev(full)))
cmdclass["speed"] = Speed

setup(name="srp6a",
      version="0.1.0",
      description="SRP-6a password-authenticated key exchange (pure python)",
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
