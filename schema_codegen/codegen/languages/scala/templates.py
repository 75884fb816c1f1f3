"""
Built-in Scala templates.
"""

CASE_CLASS_TEMPLATE = "case class {{ class_name }}({{ members | join(', ') }})"

ENUMERATION_TEMPLATE = """object {{ enum_name }} extends Enumeration {
{%- for value in values %}
{{ indent }}val {{ value.name }} = Value({{ value.literal | quote if value.literal is string else value.literal }})
{%- endfor %}
}"""

CASE_CODEC_TEMPLATE = (
    "{{ indent }}implicit def {{ class_name }}Codec: CodecJson[{{ class_name }}] = "
    "casecodec{{ arity }}({{ class_name }}.apply, {{ class_name }}.unapply)"
    "({{ field_names | map('quote') | join(', ') }})"
)

MAP_CODEC_TEMPLATE = (
    "{{ indent }}implicit def {{ class_name }}Codec: CodecJson[{{ class_name }}] = "
    "CodecJson(MapEncodeJson[{{ class_name }}], MapDecodeJson[{{ class_name }}])"
)

MODEL_FILE_TEMPLATE = """package {{ package_name }}

{{ body }}"""

CODEC_FILE_TEMPLATE = """package {{ package_name }}

import {{ codec_import }}

object {{ object_name }} {
{{ body }}
}"""

SCALA_TEMPLATES = {
    "case_class.scala.j2": CASE_CLASS_TEMPLATE,
    "enumeration.scala.j2": ENUMERATION_TEMPLATE,
    "case_codec.scala.j2": CASE_CODEC_TEMPLATE,
    "map_codec.scala.j2": MAP_CODEC_TEMPLATE,
    "model_file.scala.j2": MODEL_FILE_TEMPLATE,
    "codec_file.scala.j2": CODEC_FILE_TEMPLATE,
}
