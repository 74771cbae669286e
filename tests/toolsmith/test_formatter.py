import json
import pytest

from toolsmith.exceptions import FormattingError
from toolsmith.formatter import ToolFormatter, format_code, pascal_case
from toolsmith.models import BaseTool, FormattedTool

TOOL = BaseTool(
    name="Weather Lookup",
    description="Looks up the weather for a city",
    input_schema={"type": "object", "properties": {"city": {"type": "string"}}, "required": ["city"]},
    output_schema={"type": "object", "properties": {"tempC": {"type": "number"}}},
    code="async function run({city}){const res=await fetch(`https://wttr.in/${city}?format=j1`);return res.json()}",
    slug="weather-lookup",
)


class TestFormatCode:
    def test_beautifies_valid_code(self):
        result = format_code("function f(x){return x}")
        assert result.startswith("function f(x) {")
        assert "\n  return x" in result

    def test_accepts_module_syntax(self):
        result = format_code("import csv from 'csv-parse/sync';\nexport async function run(i){return csv.parse(i.text)}")
        assert "import csv from 'csv-parse/sync';" in result

    @pytest.mark.parametrize("code", ["function (", "return }", "const = 1"])
    def test_syntax_error_raises_formatting_error(self, code):
        with pytest.raises(FormattingError, match="could not be parsed"):
            format_code(code)

    def test_error_names_the_position(self):
        with pytest.raises(FormattingError, match=r"line 2, column \d+"):
            format_code("const a = 1;\nconst b = ;")

    @pytest.mark.parametrize(
        "code",
        [
            "async function run(i) { return i?.a ?? 1; }",
            "function f() { try { g(); } catch { return null; } }",
            "class A { #x = 1; static y = 2; get x() { return this.#x; } }",
            "const big = 1_000_000n;",
            "async function run(s) { for await (const chunk of s) { console.log(chunk); } }",
            "const { a, ...rest } = { a: 1, b: 2 };",
            "let v = null; v ??= 3; v ||= 4;",
            "const r = await fetch(url);",
        ],
    )
    def test_accepts_current_ecmascript(self, code):
        result = format_code(code)
        # Only whitespace may change
        assert "".join(result.split()) == "".join(code.split())


class TestPascalCase:
    @pytest.mark.parametrize(
        "slug, expected",
        [
            ("csv-parser", "CsvParser"),
            ("weather-lookup", "WeatherLookup"),
            ("x", "X"),
            ("3d-model-loader", "Tool3dModelLoader"),
            ("", "Tool"),
        ],
    )
    def test_pascal_case(self, slug, expected):
        assert pascal_case(slug) == expected


class TestToolFormatter:
    def test_description_gets_period_and_escaped_schema(self):
        result = ToolFormatter.to_langchain_description("Parses CSV", '{"type":"object"}')
        assert result == 'Parses CSV. The action input should adhere to this JSON schema:\n{{"type":"object"}}'

    def test_description_keeps_existing_period(self):
        result = ToolFormatter.to_langchain_description("Parses CSV.", "null")
        assert result.startswith("Parses CSV. The action")
        assert ".." not in result

    def test_stringify_json_schema(self):
        assert ToolFormatter.stringify_json_schema(None) == "null"
        assert ToolFormatter.stringify_json_schema({"a": 1}) == '{\n    "a": 1\n  }'

    def test_langchain_module_shape(self):
        code = ToolFormatter(TOOL).to_langchain()

        assert code.startswith("import { Tool } from 'langchain/tools';")
        assert "class WeatherLookup extends Tool {" in code
        assert "name = 'weather-lookup';" in code
        assert "async function run({" in code
        assert "const result = await run(JSON.parse(input));" in code
        assert code.rstrip().endswith("export default WeatherLookup;")

    def test_description_is_a_js_string_literal_with_escaped_schema(self):
        code = ToolFormatter(TOOL).to_langchain()
        expected = json.dumps(
            "Looks up the weather for a city. The action input should adhere to this JSON schema:\n"
            '{{"type":"object","properties":{{"city":{{"type":"string"}}}},"required":["city"]}}'
        )
        assert f"description = {expected};" in code

    def test_schemas_are_pretty_printed(self):
        code = ToolFormatter(TOOL).to_langchain()
        assert 'inputSchema = {\n    "type": "object",' in code
        assert 'outputSchema = {\n    "type": "object",' in code

    def test_formatting_is_deterministic(self):
        first = ToolFormatter(TOOL).tool_with_formats()
        second = ToolFormatter(TOOL.model_copy()).tool_with_formats()
        assert first.langchain_code == second.langchain_code

    def test_tool_with_formats_keeps_fields(self):
        tool = ToolFormatter(TOOL).tool_with_formats()
        assert isinstance(tool, FormattedTool)
        assert tool.slug == TOOL.slug
        assert tool.code == TOOL.code
        assert tool.model_dump(by_alias=True)["langChainCode"] == tool.langchain_code
