from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, SelectField, SelectMultipleField, SubmitField
from wtforms.validators import DataRequired, Length, Optional

from app.models.content import Content
from app.utils.fields import JSONObjectField
from app.utils.validators import validate_slug


class ContentForm(FlaskForm):
    """内容编辑表单 (新建与编辑共用)"""
    title = StringField('Title', validators=[DataRequired(), Length(max=200)])
    description = TextAreaField('Description', validators=[Optional(), Length(max=500)])
    slug = StringField('Slug', validators=[DataRequired(), Length(max=200), validate_slug])
    body = TextAreaField('Body')
    type = SelectField('Type', choices=[(t, t.title()) for t in Content.TYPES], default='article')
    status = SelectField('Status', choices=[(s, s.title()) for s in Content.STATUSES],
                         default=Content.STATUS_DRAFT)
    metadata = JSONObjectField('Metadata')
    # 可选项来自标签目录，渲染/校验前由 set_tag_choices 填充
    tags = SelectMultipleField('Tags', coerce=int, choices=[])
    submit = SubmitField('Save')

    def set_tag_choices(self, tags):
        self.tags.choices = [(tag.id, tag.name) for tag in tags]

    def content_fields(self):
        """校验通过后的可持久化字段"""
        return {
            'title': self.title.data,
            'description': self.description.data or '',
            'slug': self.slug.data,
            'body': self.body.data or '',
            'type': self.type.data,
            'status': self.status.data,
            'metadata': dict(self.metadata.data or {}),
            'tags': list(self.tags.data or []),
        }
