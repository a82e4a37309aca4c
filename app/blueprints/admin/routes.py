from flask import render_template, request, flash, redirect, url_for, current_app
from flask_login import login_required

from app.blueprints.admin import admin_bp
from app.blueprints.admin.forms import ContentForm
from app.blueprints.admin.pages import load_content_page, save_content_page
from app.models.content import Content
from app.services.content_service import ContentService
from app.services.search_service import SearchService
from app.services.tag_service import TagService
from app.utils.decorators import admin_required


@admin_bp.route('/content')
@login_required
@admin_required
def content_list():
    """内容列表"""
    page = request.args.get('page', 1, type=int)
    status = request.args.get('status', '', type=str)
    content_type = request.args.get('type', '', type=str)

    pagination = ContentService.list_contents(
        status=status if status in Content.STATUSES else None,
        content_type=content_type if content_type in Content.TYPES else None,
        page=page,
        per_page=current_app.config['ADMIN_PER_PAGE'],
    )
    return render_template('admin/content_list.html',
                           pagination=pagination,
                           contents=pagination.items,
                           current_status=status,
                           current_type=content_type,
                           statuses=Content.STATUSES,
                           types=Content.TYPES)


@admin_bp.route('/content/<int:content_id>', methods=['GET'])
@login_required
@admin_required
def content_edit(content_id):
    """编辑页：预填充表单"""
    return render_template('admin/content_edit.html', **load_content_page(content_id))


@admin_bp.route('/content/<int:content_id>', methods=['POST'])
@login_required
@admin_required
def content_update(content_id):
    """编辑页：提交保存"""
    page, status_code = save_content_page(content_id)
    return render_template('admin/content_edit.html', **page), status_code


@admin_bp.route('/content/new', methods=['GET', 'POST'])
@login_required
@admin_required
def content_new():
    """新建内容"""
    tags = TagService.get_all_tags()
    form = ContentForm()
    form.set_tag_choices(tags)

    if form.validate_on_submit():
        if Content.query.filter_by(slug=form.slug.data).first():
            form.slug.errors.append('Slug is already in use.')
        else:
            try:
                content = ContentService.create_content(form.content_fields())
                SearchService.sync(content)
            except Exception as e:
                current_app.logger.error(f'Error creating content: {e}')
                flash('Failed to create content. Please try again.', 'danger')
            else:
                flash('Content created successfully.', 'success')
                return redirect(url_for('admin.content_edit', content_id=content.id))

    return render_template('admin/content_new.html', form=form, tags=tags)


@admin_bp.route('/content/<int:content_id>/delete', methods=['POST'])
@login_required
@admin_required
def content_delete(content_id):
    """软删除内容并移出索引"""
    if ContentService.delete_content(content_id):
        try:
            SearchService.remove(content_id)
        except Exception as e:
            current_app.logger.error(f'Error removing content {content_id} from search index: {e}')
            flash('Content deleted, but the search index could not be updated. Run flask reindex.', 'warning')
        else:
            flash('Content deleted.', 'success')
    else:
        flash('Content not found.', 'warning')
    return redirect(url_for('admin.content_list'), code=303)
