from textwrap import dedent

import pytest

from mapper.annotate import AnnotatorRegistry, PythonAnnotator, TreeSitterAnnotator
from mapper.errors import ParseError
from mapper.fs_scan import file_entry


def names(units):
	return [(u.name, u.methods) for u in units]


def test_python_top_level_classes_and_methods():
	code = dedent(
		"""
		import os

		class A(Base):
			def m(self, x, *, y=1, **kw):
				return x

			async def n(self):
				class Inner:
					def hidden(self):
						pass

		def f(a, b=2):
			return a + b

		class B:
			pass
		"""
	)
	assert names(PythonAnnotator().parse(code)) == [("A", ["m", "n"]), ("B", [])]


def test_python_syntax_error_raises_parse_error():
	with pytest.raises(ParseError):
		PythonAnnotator().parse("class Broken(:\n")


def test_csharp_types_and_members_in_declaration_order():
	code = dedent(
		"""
		using System.Collections.Generic;

		namespace Shop.Orders
		{
			/* class Commented { void Nope() {} } */
			[Serializable]
			public sealed class OrderService : IOrderService
			{
				private readonly List<Order> _orders = new List<Order>();
				public int Count { get; private set; }

				public OrderService(IRepo repo) : base(repo) { }

				[HttpGet("{id}")]
				public async Task<Order> GetAsync(int id)
				{
					if (id < 0) { throw new ArgumentException("class Fake {"); }
					foreach (var o in _orders) { Log(o); }
					return await Find(id);
				}

				public T Convert<T>(object value) where T : class => (T)value;

				// void Commented() {}
				private static void Log(Order o) { }

				public class Nested
				{
					void Inner() { }
				}
			}

			public interface IOrderService
			{
				Task<Order> GetAsync(int id);
			}

			public enum Status { Open, Closed }

			public record Point(int X, int Y);
		}
		"""
	)
	assert names(TreeSitterAnnotator("csharp").parse(code)) == [
		("OrderService", ["OrderService", "GetAsync", "Convert", "Log"]),
		("Nested", ["Inner"]),
		("IOrderService", ["GetAsync"]),
		("Status", []),
		("Point", []),
	]


def test_java_and_typescript_classes():
	java = "public class Greeter extends Base { @Override public String greet(String n) { return n; } }"
	assert names(TreeSitterAnnotator("java").parse(java)) == [("Greeter", ["greet"])]

	ts = dedent(
		"""
		export class Store {
			private items: Map<string, number> = new Map();
			constructor(private name: string) {}
			get size(): number { return this.items.size; }
			add = (key: string) => { this.items.set(key, 1); };
			async load(): Promise<void> { await fetch(`/api/${this.name}`); }
		}
		"""
	)
	assert names(TreeSitterAnnotator("typescript").parse(ts)) == [("Store", ["constructor", "size", "load"])]


def test_java_enum_constants_are_not_methods():
	java = dedent(
		"""
		public enum Color {
			RED("r"), GREEN("g");

			private final String code;

			Color(String code) { this.code = code; }

			public String code() { return code; }
		}
		"""
	)
	assert names(TreeSitterAnnotator("java").parse(java)) == [("Color", ["Color", "code"])]


def test_java_text_block_with_braces_is_valid():
	java = dedent(
		'''
		class Payload {
			String json() {
				return """
					{"a": 1
					""";
			}
		}
		'''
	)
	assert names(TreeSitterAnnotator("java").parse(java)) == [("Payload", ["json"])]


def test_javascript_and_typescript_interfaces():
	js = "export class Index { run() {} static make() { return new Index(); } }\nfunction helper() {}\n"
	assert names(TreeSitterAnnotator("javascript").parse(js)) == [("Index", ["run", "make"])]

	ts = "interface Shape { area(): number; name: string; }\nabstract class Base { abstract draw(): void; }\n"
	assert names(TreeSitterAnnotator("typescript").parse(ts)) == [("Shape", ["area"]), ("Base", ["draw"])]


def test_syntax_errors_raise_parse_error():
	with pytest.raises(ParseError, match="csharp syntax error at line 1"):
		TreeSitterAnnotator("csharp").parse("public class Broken { public void M() {")
	with pytest.raises(ParseError, match="syntax error"):
		TreeSitterAnnotator("csharp").parse("class A { } }")
	with pytest.raises(ParseError, match="java syntax error"):
		TreeSitterAnnotator("java").parse("class A {\n\tvoid m( {}\n}\n")


def test_registry_matches_extensions_case_insensitively(tmp_path):
	registry = AnnotatorRegistry()
	assert registry.is_source(".CS")
	assert registry.is_source(".py")
	assert not registry.is_source(".txt")
	assert not registry.is_source("")

	p = tmp_path / "m.PY"
	p.write_text("class C:\n\tdef run(self):\n\t\tpass\n")
	assert names(registry.annotate_file(file_entry(str(p)))) == [("C", ["run"])]


def test_registry_reports_unreadable_files_as_parse_errors(tmp_path):
	p = tmp_path / "bad.cs"
	p.write_bytes(b"\xff\xfe\x00class")
	with pytest.raises(ParseError) as info:
		AnnotatorRegistry().annotate_file(file_entry(str(p)))
	assert info.value.path == str(p)


def test_registry_accepts_custom_annotators(tmp_path):
	class Fixed:
		def parse(self, text):
			return PythonAnnotator().parse("class Only:\n\tdef one(self): pass\n")

	registry = AnnotatorRegistry({".txt": Fixed()})
	p = tmp_path / "notes.txt"
	p.write_text("anything")
	assert names(registry.annotate_file(file_entry(str(p)))) == [("Only", ["one"])]
	assert not registry.is_source(".py")


def test_registry_strips_utf8_bom(tmp_path):
	p = tmp_path / "bom.py"
	p.write_bytes(b"\xef\xbb\xbfclass C:\n    def run(self):\n        pass\n")
	assert names(AnnotatorRegistry().annotate_file(file_entry(str(p)))) == [("C", ["run"])]

	cs = tmp_path / "Bom.cs"
	cs.write_bytes("\ufeffclass Foo { void Bar() {} }".encode("utf-8"))
	assert names(AnnotatorRegistry().annotate_file(file_entry(str(cs)))) == [("Foo", ["Bar"])]
