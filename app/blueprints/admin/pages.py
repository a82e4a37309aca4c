"""
内容编辑页的加载与提交逻辑。
路由层只负责渲染；这里返回视图模型字典和 HTTP 状态码。
"""
import traceback
from collections import namedtuple

from flask import abort, current_app, redirect, url_for
from werkzeug.exceptions import HTTPException

from app.blueprints.admin.forms import ContentForm
from app.services.content_service import ContentService, merge_metadata, to_form_data
from app.services.search_service import SearchService
from app.services.tag_service import TagService

FormMessage = namedtuple('FormMessage', ['success', 'text'])

INVALID_FORM_MESSAGE = 'Invalid form data. Please check the form and try again.'
UPDATED_MESSAGE = 'Content updated successfully.'
UPDATE_FAILED_MESSAGE = 'Failed to update content. Please try again.'


def redirect_to_listing():
    """中断当前请求并 303 跳回内容列表"""
    abort(redirect(url_for('admin.content_list'), code=303))


def load_content_page(content_id):
    content = ContentService.get_content_by_id(content_id)
    if content is None:
        redirect_to_listing()

    form = ContentForm(data=to_form_data(content))
    tags = TagService.get_all_tags()
    form.set_tag_choices(tags)

    return {
        'form': form,
        'tags': tags,
        'content_id': content_id,
        'content': content, # 完整记录，用于侧栏展示
        'message': None,
    }


def save_content_page(content_id):
    """
    处理编辑提交
    :return: (视图模型, HTTP 状态码)
    """
    tags = TagService.get_all_tags()
    form = ContentForm()
    form.set_tag_choices(tags)
    page = {'form': form, 'tags': tags, 'content_id': content_id, 'content': None}

    if not form.validate_on_submit():
        page['content'] = ContentService.get_content_by_id(content_id)
        page['message'] = FormMessage(False, INVALID_FORM_MESSAGE)
        return page, 400

    try:
        # 重新读取现有记录，导入内容的来源元数据要保留
        existing = ContentService.get_content_by_id(content_id)
        fields = form.content_fields()
        fields['body'] = fields['body'] or ''
        fields['metadata'] = merge_metadata(existing.meta_data if existing else None,
                                            fields['metadata'])

        ContentService.update_content(content_id, fields)

        # 以更新后的记录为准同步索引
        content = ContentService.get_content_by_id(content_id)
        SearchService.sync(content)

        page['content'] = content
        page['message'] = FormMessage(True, UPDATED_MESSAGE)
        return page, 200
    except HTTPException:
        raise
    except Exception as e:
        current_app.logger.error(f'Error updating content {content_id}: {e}')
        current_app.logger.error(traceback.format_exc())
        page['content'] = _reload_for_display(content_id)
        page['message'] = FormMessage(False, UPDATE_FAILED_MESSAGE)
        return page, 200


def _reload_for_display(content_id):
    """保存失败后重新读取记录供侧栏展示，读取本身失败时不显示侧栏"""
    try:
        return ContentService.get_content_by_id(content_id)
    except Exception as e:
        current_app.logger.error(f'Error reloading content {content_id}: {e}')
        return None
