from setuptools import setup

setup(name='segtree',
      version='0.1',
      description='Segment tree with sum, min and max range queries and point updates',
      author='Chris Reddy',
      author_email='christopher.t.reddy@gmail.com',
      license='MIT',
      packages=['segtree', 'segtree.data_structures'],
      install_requires=['numpy'],
      extras_require={'test': ['pytest']},
      zip_safe=False)
