from textwrap import dedent

import pytest


FOO_SOURCE = dedent(
	"""
	using System;

	namespace Demo
	{
		public class Foo
		{
			public void Bar()
			{
				Console.WriteLine("{ not a brace }");
			}
		}
	}
	"""
)


@pytest.fixture
def project(tmp_path):
	"""Proj/{bin/Tool.dll, Src/A.cs, Readme.sln}"""
	root = tmp_path / "Proj"
	(root / "bin").mkdir(parents=True)
	(root / "bin" / "Tool.dll").write_text("binary")
	(root / "Src").mkdir()
	(root / "Src" / "A.cs").write_text(FOO_SOURCE)
	(root / "Readme.sln").write_text("solution")
	return root
