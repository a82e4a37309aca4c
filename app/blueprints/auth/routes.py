from flask import render_template, redirect, request, url_for, flash, current_app
from flask_login import login_user, logout_user, login_required, current_user
from urllib.parse import urlsplit

from app.models.auth import User
from app.blueprints.auth import auth_bp
from app.blueprints.auth.forms import LoginForm

@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    # 如果已登录，直接跳到内容列表
    if current_user.is_authenticated:
        return redirect(url_for('admin.content_list'))

    form = LoginForm()
    if form.validate_on_submit():
        user = User.query.filter_by(email=form.email.data).first()

        # 1. 验证用户与密码
        if user is None or not user.verify_password(form.password.data):
            current_app.logger.warning(f'login failed for {form.email.data}')
            flash('Invalid credentials.', 'danger')
            return redirect(url_for('auth.login'))

        # 2. 验证账号状态 (软删除/封禁)
        if not user.is_active:
            flash('This account has been disabled.', 'danger')
            return redirect(url_for('auth.login'))

        # 3. 执行登录
        login_user(user, remember=form.remember_me.data)
        user.touch_login()

        # 4. 处理 Next 跳转 (防止开放重定向攻击)
        next_page = request.args.get('next')
        if not next_page or urlsplit(next_page).netloc != '':
            next_page = url_for('admin.content_list')
        return redirect(next_page)

    return render_template('auth/login.html', form=form)

@auth_bp.route('/logout')
@login_required
def logout():
    logout_user()
    flash('You have been signed out.', 'info')
    return redirect(url_for('auth.login'))
