"""
自定义表单字段
"""
import json
from wtforms import TextAreaField


class JSONObjectField(TextAreaField):
    """
    以 JSON 文本编辑的键值对象。
    空输入视为 {}；不是合法 JSON 或不是对象时记为字段错误。
    """

    def _value(self):
        if self.raw_data:
            return self.raw_data[0]
        return json.dumps(self.data or {}, ensure_ascii=False, indent=2)

    def process_formdata(self, valuelist):
        if not valuelist or not valuelist[0].strip():
            self.data = {}
            return
        try:
            data = json.loads(valuelist[0])
        except ValueError:
            self.data = None
            raise ValueError('Metadata must be valid JSON.')
        if not isinstance(data, dict):
            self.data = None
            raise ValueError('Metadata must be a JSON object.')
        self.data = data

    def process_data(self, value):
        self.data = dict(value) if value else {}
